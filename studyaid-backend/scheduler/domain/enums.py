from enum import IntEnum

class Difficulty(IntEnum):
    VERY_EASY = 1
    EASY = 2
    MEDIUM = 3
    HARD = 4
    VERY_HARD = 5

DIFFICULTY_LABELS = {
    Difficulty.VERY_EASY: "Very Easy",
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
    Difficulty.VERY_HARD: "Very Hard",
}
