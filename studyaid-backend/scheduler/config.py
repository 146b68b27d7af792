DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
MAX_EASE_FACTOR = 3.0
EASE_STEP_UP = 0.1      # ratings 1-2
EASE_STEP_DOWN = 0.2    # ratings 4-5

FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 3       # rated medium or easier
SECOND_INTERVAL_HARD_DAYS = 1  # rated hard or very hard
THIRD_INTERVAL_DAYS = 7
MAX_INTERVAL_DAYS = 365

DIFFICULTY_MULTIPLIER = {
    1: 2.5,
    2: 2.0,
    3: 1.5,
    4: 1.0,
    5: 0.5,
}
