class MissingVideoId(ValueError):
    """Raised when neither a videoId nor a recognised video URL was supplied."""

    def __init__(self, message: str = "Missing or invalid YouTube URL / videoId"):
        super().__init__(message)
