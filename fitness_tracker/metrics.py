from prometheus_client import Counter

WORKOUTS_CREATED_TOTAL = Counter(
    "fitness_workouts_created_total",
    "Number of workouts created",
    ["source"],  # manual | log
)

EXERCISES_CREATED_TOTAL = Counter(
    "fitness_exercises_created_total",
    "Number of exercises created",
    ["type"],  # strength | cardio
)

STORAGE_READ_FAILURES_TOTAL = Counter(
    "fitness_storage_read_failures_total",
    "Number of read queries that failed and were served as empty results",
    ["operation"],
)

GENERATION_REQUESTS_TOTAL = Counter(
    "fitness_generation_requests_total",
    "Number of workout generation requests sent to the text-generation endpoint",
    ["outcome"],  # success | error
)
