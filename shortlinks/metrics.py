from prometheus_client import Counter, Histogram

RESOLUTIONS = Counter(
    'shortlinks_resolutions_total',
    'Shortlink resolutions by outcome',
    ['outcome'],
)

SERVICE_LATENCY = Histogram(
    'shortlinks_service_seconds',
    'Time spent waiting for the shortening service',
)
