from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    webhook_secret: str
    backend_secret: str
    graphql_url: str
    notification_url: str
    sanity_project_id: str
    sanity_dataset: str = "production"
    sanity_api_version: str = "2023-05-03"
    sanity_token: str = ""
    stripe_api_key: str = ""
    site_url: str = "http://localhost:3000"
    webhook_tolerance: int = 300
    webhook_redeliver_on_failure: bool = False
    log_level: str = "INFO"
