from content_store.repos.content_repo import FileContentRepo
from content_store.services.content_store import ContentStore
from content_store.settings import settings


def get_content_repo(config=None):
    config = config or settings
    return FileContentRepo(config.content_path, config.checklist_path)


def get_content_store(config=None, repo=None):
    config = config or settings
    repo = repo or get_content_repo(config)
    return ContentStore(
        repo=repo,
        allowed_categories=config.allowed_categories,
        words_per_minute=config.WORDS_PER_MINUTE,
    )
