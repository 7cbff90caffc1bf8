"""Shared test fixtures."""

import pytest

from vision_api.models.image import FaceDetection, FaceIdentity, ImageAnalysis, ImageKeyword
from vision_api.schema.interface import ImageRecord, OccurrenceThreshold


def image_url(image_id: str) -> str:
    return f"http://testserver/images/image/{image_id}.jpg"


def make_image(
    image_id: str,
    faces: list[tuple[str | None, float]] = (),
    keywords: list[tuple[str, float]] = (),
    timecode: float | None = None,
    video_id: str | None = "video-1",
) -> ImageRecord:
    """ImageRecord with one face per (name, score) and one keyword per (class, score)."""
    return ImageRecord(
        id=image_id,
        video_id=video_id,
        frame_timecode=timecode,
        analysis=ImageAnalysis(
            face_detection=[
                FaceDetection(identity=FaceIdentity(name=name, score=score) if name is not None else None)
                for name, score in faces
            ],
            image_keywords=[ImageKeyword(class_=cls, score=score) for cls, score in keywords],
        ),
    )


@pytest.fixture
def face_threshold() -> OccurrenceThreshold:
    return OccurrenceThreshold(
        minimum_occurrence=3,
        minimum_score=0.85,
        minimum_score_occurrence=2,
        maximum_occurrence_count=5,
    )


@pytest.fixture
def keyword_threshold() -> OccurrenceThreshold:
    return OccurrenceThreshold(
        minimum_occurrence=1,
        minimum_score=0.60,
        minimum_score_occurrence=1,
        maximum_occurrence_count=5,
    )
