import logging
import os


class Settings:
    @property
    def OUTPUT_DIR(self):
        return os.environ.get("MODKIT_OUTPUT_DIR", "output")

    @property
    def WRITE_CONCURRENCY(self):
        value = int(os.environ.get("MODKIT_WRITE_CONCURRENCY", "8"))
        if value < 1:
            raise ValueError(
                f"MODKIT_WRITE_CONCURRENCY must be a positive integer, got {value}"
            )
        return value

    @property
    def SHOW_PROGRESS(self):
        return os.environ.get("MODKIT_SHOW_PROGRESS", "true") == "true"

    @property
    def HUMANIZE_LOGS(self):
        return os.environ.get("HUMANIZE_LOGS", "false") == "true"

    @property
    def LOG_LEVEL(self):
        level_str = os.environ.get("LOG_LEVEL", "INFO")
        return getattr(logging, level_str.upper(), logging.INFO)


settings = Settings()
