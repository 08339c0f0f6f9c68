"""
WorkConnect Database Seeder

Loads the demo marketplace into the SQL database at DATABASE_URL:
- 4 workers with profiles and ratings
- 4 employers with company profiles
- 1 job posting per employer
"""

import sys
sys.path.insert(0, ".")

from workconnect.core.config import settings
from workconnect.services.sample_data import SAMPLE_EMPLOYERS, SAMPLE_PASSWORD, SAMPLE_WORKERS, seed_sample_data
from workconnect.store import SqlStore


def seed_database():
    """Seed the database with demo data."""

    store = SqlStore(settings.DATABASE_URL)

    try:
        print("Seeding database...")
        if not seed_sample_data(store):
            print("Database already seeded. Skipping...")
            return

        print("✅ Database seeded successfully!")
        print("\n📋 Created Users:")
        for sample in SAMPLE_WORKERS + SAMPLE_EMPLOYERS:
            print(f"   - {sample['user']['email']} (password: {SAMPLE_PASSWORD})")
        print(f"\n💼 Job postings: {len(store.job_postings.list())}")

    except Exception as e:
        print(f"❌ Error seeding database: {e}")
        raise
    finally:
        store.close()


if __name__ == "__main__":
    seed_database()
