from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_name: str = "Hedera Transaction Reconciler"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3009

    # DragonGlass explorer (REST)
    dragonglass_url: str = "https://explore.hbar.live/DG/"
    dragonglass_cache_seconds: int = 30

    # HGraph indexer (GraphQL)
    hgraph_url: str = "https://mainnet.hedera.api.hgraph.io/v1/graphql"
    hgraph_limit: int | None = None

    # Outbound calls
    provider_timeout_seconds: float = 5.0

    # Filter triple watched by the dashboard
    dashboard_payer_id: int = 26027
    dashboard_query: str = "kpay.live"
    dashboard_account_from: int = 657983

    class Config:
        env_file = ".env"


settings = Settings()
