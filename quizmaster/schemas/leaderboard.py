from quizmaster.schemas.auth import UserOut

class GlobalLeaderboardEntry(UserOut):
    rank: int
    # Sum of raw session scores; unrelated to the points accumulator
    total_score: int

class ThemeLeaderboardEntry(UserOut):
    rank: int
    best_score: int
