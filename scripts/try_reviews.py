import asyncio
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from study_srs import (  # noqa: E402
    MongoReviewRepository,
    StudyReviews,
    TopicRef,
    format_interval,
)


# Simple usage - config loaded from .env automatically
async def main() -> None:
    async with StudyReviews(storage_class=MongoReviewRepository) as sr:
        topic = TopicRef(
            topic_id="topic-krebs",
            subject_id="subject-bio",
            curriculum_id="curriculum-alevel",
            topic_name="Krebs cycle",
            subject_name="Biology",
            curriculum_name="A-Level",
        )
        item = await sr.add_topic("demo-user", topic)

        for option in await sr.preview_review("demo-user", item.item_id):
            print(f"{option.label:>18}: {format_interval(option.interval)}")

        # outcome = await sr.submit_review("demo-user", item.item_id, remembered=True)
        stats = await sr.get_statistics("demo-user")
        print(stats.total_items, stats.due_today, stats.average_retention)


if __name__ == "__main__":
    asyncio.run(main())
