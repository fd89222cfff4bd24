"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Batch runner ────────────────────────────────────────────
    # Each template is formatted with run=<scenario number>
    PRINTERS_INPUT_TEMPLATE: str = "./resources/input/printers/input{run}.txt"
    ORDERS_INPUT_TEMPLATE: str = "./resources/input/orders/input{run}.txt"
    OUTPUT_TEMPLATE: str = "./resources/output/output{run}.txt"
    BATCH_RUNS: int = 5

    # ── API guards ──────────────────────────────────────────────
    MAX_PRINTERS: int = 64
    MAX_JOBS_PER_REQUEST: int = 10_000

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    def printers_path(self, run: int) -> str:
        return self.PRINTERS_INPUT_TEMPLATE.format(run=run)

    def orders_path(self, run: int) -> str:
        return self.ORDERS_INPUT_TEMPLATE.format(run=run)

    def output_path(self, run: int) -> str:
        return self.OUTPUT_TEMPLATE.format(run=run)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton - import this everywhere
settings = Settings()
