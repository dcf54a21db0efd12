from functools import lru_cache
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class Settings(BaseSettings):
    log_level: str = "INFO"
    log_json: bool = True

    # Lead persistence; the JSON file is the local fallback when the database write fails
    database_url: str = "sqlite:///./speech_profile.db"
    lead_fallback_path: str = "./leads_fallback.json"

    # In-progress questionnaire drafts
    draft_path: str = "./.speech_profile_draft.json"
    draft_max_age_hours: int = 24

    community_url: str = "https://chat.whatsapp.com/GJdRe8ZhIHBHwT3TiadtkL/"

    model_config = SettingsConfigDict(env_prefix='SPEECH_PROFILE_')


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
