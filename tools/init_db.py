from idea_validator_core.config import get_settings
from idea_validator_core.db.report_store import ReportStore


def main():
    settings = get_settings()
    store = ReportStore.from_url(settings.database_url)
    store.create_schema()
    store.dispose()
    print("✅ DB creada/verificada usando DATABASE_URL.")


if __name__ == "__main__":
    main()
