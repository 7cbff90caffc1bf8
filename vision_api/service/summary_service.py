from typing import Callable, Iterable

from vision_api.core.logger import SimpleLogger
from vision_api.repository.image import ImageRepository
from vision_api.repository.video import VideoRepository
from vision_api.schema.interface import ImageRecord, Occurrence, OccurrenceThreshold
from vision_api.schema.response import SummaryEntry, VideoSummary

logger = SimpleLogger(__name__)

OccurrenceMap = dict[str, list[Occurrence]]


def collect_occurrences(
    images: Iterable[ImageRecord],
    image_url: Callable[[str], str],
) -> tuple[OccurrenceMap, OccurrenceMap]:
    """
    Map person names and keyword classes to every sighting across the given images.

    Keys keep the order in which they are first seen, and each key keeps its
    sightings in image order. Faces without an identity name and keywords
    without a class are skipped.
    """
    people: OccurrenceMap = {}
    keywords: OccurrenceMap = {}

    for image in images:
        if image.analysis is None:
            continue
        url = image_url(image.id)

        for face in image.analysis.face_detection:
            if face.identity is None or not face.identity.name:
                continue
            people.setdefault(face.identity.name, []).append(Occurrence(
                key=face.identity.name,
                score=face.identity.score,
                image_id=image.id,
                image_url=url,
                timecode=image.frame_timecode,
                detail=face.model_dump(by_alias=True, exclude_none=True),
            ))

        for keyword in image.analysis.image_keywords:
            if not keyword.class_:
                continue
            keywords.setdefault(keyword.class_, []).append(Occurrence(
                key=keyword.class_,
                score=keyword.score,
                image_id=image.id,
                image_url=url,
                timecode=image.frame_timecode,
                detail=keyword.model_dump(by_alias=True, exclude_none=True),
            ))

    return people, keywords


def filter_occurrences(occurrences: OccurrenceMap, threshold: OccurrenceThreshold) -> list[SummaryEntry]:
    """Keep the keys meeting the threshold, each collapsed to its best occurrence, best keys first."""
    kept: list[Occurrence] = []
    for key, occurs in occurrences.items():
        if len(occurs) < threshold.minimum_occurrence:
            continue

        above = sum(1 for o in occurs if o.score >= threshold.minimum_score)
        if above < threshold.minimum_score_occurrence:
            continue

        # sorted() is stable, ties keep the earliest sighting
        kept.append(sorted(occurs, key=lambda o: o.score, reverse=True)[0])

    ranked = sorted(kept, key=lambda o: o.score, reverse=True)
    if threshold.maximum_occurrence_count > 0:
        ranked = ranked[:threshold.maximum_occurrence_count]

    return [SummaryEntry(occurrences=[o.to_response()]) for o in ranked]


def summarize_images(
    images: Iterable[ImageRecord],
    image_url: Callable[[str], str],
    face_threshold: OccurrenceThreshold,
    keyword_threshold: OccurrenceThreshold,
) -> VideoSummary:
    people, keywords = collect_occurrences(images, image_url)
    return VideoSummary(
        face_detection=filter_occurrences(people, face_threshold),
        image_keywords=filter_occurrences(keywords, keyword_threshold),
    )


class VideoSummaryService:
    def __init__(
        self,
        video_repo: VideoRepository,
        image_repo: ImageRepository,
        face_threshold: OccurrenceThreshold,
        keyword_threshold: OccurrenceThreshold,
    ):
        self.video_repo = video_repo
        self.image_repo = image_repo
        self.face_threshold = face_threshold
        self.keyword_threshold = keyword_threshold

    async def summarize(self, video_id: str, image_url: Callable[[str], str]) -> VideoSummary:
        logger.info(f"Retrieving video {video_id}")
        video = await self.video_repo.get_video(video_id)

        logger.info(f"Retrieving images for {video.id}")
        images = await self.image_repo.get_images_by_video_id(video.id)

        logger.info(f"Summarizing analysis of {len(images)} images")
        return summarize_images(images, image_url, self.face_threshold, self.keyword_threshold)
