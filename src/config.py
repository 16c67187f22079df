from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Remote timed-text endpoints
    CAPTION_LIST_URL: str = "https://video.google.com/timedtext"
    TRANSCRIPT_URL: str = "https://video.google.com/timedtext"
    REQUEST_TIMEOUT: float = 30.0
    USER_AGENT: str = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"

    # Language Settings ("auto" = first caption track listed)
    TRANSCRIPT_LANG: str = "auto"

    # Text assembly
    MIN_SEGMENT_LENGTH: int = 2
    PARAGRAPH_SIZE: int = 5
    SPEAKING_RATE_WPM: int = 150

    # Extractive summary
    MIN_SENTENCE_LENGTH: int = 40
    MIN_SUMMARY_SENTENCES: int = 6
    SUMMARY_HEAD_SIZE: int = 3
    SUMMARY_STRIDE: int = 5
    SUMMARY_TAIL_SIZE: int = 3

    # System Settings
    LOG_LEVEL: str = "INFO"
    DEVELOPER: str = "@lakshitpatidar"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env", 
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
