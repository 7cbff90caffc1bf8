from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vision_api.schema.interface import OccurrenceThreshold


class MongoDBSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    MONGO_HOST: str = 'localhost'
    MONGO_PORT: int = 27017
    MONGO_USER: str | None = None
    MONGO_PASSWORD: str | None = None
    MONGO_DB: str = 'iot-tank'

    @property
    def MONGO_URI(self) -> str:
        if self.MONGO_USER and self.MONGO_PASSWORD:
            return f'mongodb://{self.MONGO_USER}:{self.MONGO_PASSWORD}@{self.MONGO_HOST}:{self.MONGO_PORT}'
        return f'mongodb://{self.MONGO_HOST}:{self.MONGO_PORT}'


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    MEDIA_FOLDER: str = 'media'
    STATIC_FOLDER: str = 'public'

    # Admin routes are open when ADMIN_USERNAME is empty
    ADMIN_USERNAME: str | None = None
    ADMIN_PASSWORD: str | None = None


class SummarySettings(BaseSettings):
    """Thresholds used to decide which faces and keywords make it into a video summary."""
    model_config = SettingsConfigDict(env_file='.env', env_prefix='SUMMARY_', extra='ignore')

    FACE_MINIMUM_OCCURRENCE: int = Field(default=3, ge=0)
    FACE_MINIMUM_SCORE: float = 0.85
    FACE_MINIMUM_SCORE_OCCURRENCE: int = Field(default=2, ge=0)
    FACE_MAXIMUM_OCCURRENCE_COUNT: int = 5

    KEYWORD_MINIMUM_OCCURRENCE: int = Field(default=1, ge=0)
    KEYWORD_MINIMUM_SCORE: float = 0.60
    KEYWORD_MINIMUM_SCORE_OCCURRENCE: int = Field(default=1, ge=0)
    KEYWORD_MAXIMUM_OCCURRENCE_COUNT: int = 5

    def face_threshold(self) -> OccurrenceThreshold:
        return OccurrenceThreshold(
            minimum_occurrence=self.FACE_MINIMUM_OCCURRENCE,
            minimum_score=self.FACE_MINIMUM_SCORE,
            minimum_score_occurrence=self.FACE_MINIMUM_SCORE_OCCURRENCE,
            maximum_occurrence_count=self.FACE_MAXIMUM_OCCURRENCE_COUNT,
        )

    def keyword_threshold(self) -> OccurrenceThreshold:
        return OccurrenceThreshold(
            minimum_occurrence=self.KEYWORD_MINIMUM_OCCURRENCE,
            minimum_score=self.KEYWORD_MINIMUM_SCORE,
            minimum_score_occurrence=self.KEYWORD_MINIMUM_SCORE_OCCURRENCE,
            maximum_occurrence_count=self.KEYWORD_MAXIMUM_OCCURRENCE_COUNT,
        )
