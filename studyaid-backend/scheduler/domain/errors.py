class InvalidDifficulty(ValueError):
    def __init__(self, difficulty):
        super().__init__(f"difficulty level must be between 1 and 5, got {difficulty!r}")
        self.difficulty = difficulty


class ScheduleNotFound(LookupError):
    def __init__(self, user_id, note_id):
        super().__init__(f"no review schedule for user {user_id} and note {note_id}")
        self.user_id = user_id
        self.note_id = note_id
