import os

from dotenv import load_dotenv

# Load local env in dev, or .env in prod
if os.path.exists(".env.local"):
    load_dotenv(".env.local")
else:
    load_dotenv(".env")


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Site
    SITE_NAME = os.getenv("SITE_NAME", "Epic Of Code")
    SITE_URL = os.getenv("SITE_URL", "https://epicofcode.com/")
    SITE_TITLE = os.getenv("SITE_TITLE", "Epic of Code")
    CONTACT_MAIL = os.getenv("CONTACT_MAIL", "epicofcode@gmail.com")

    # Base urls per environment
    DEV_URL = os.getenv("DEV_URL", "http://localhost:5173/")
    PROD_URL = os.getenv("PROD_URL", "https://epicofcode.com/")

    def __init__(self, dev: bool | None = None):
        self._dev = dev

    @property
    def dev(self) -> bool:
        if self._dev is not None:
            return self._dev
        return _is_truthy(os.getenv("DEV", ""))

    @property
    def url(self) -> str:
        return self.DEV_URL if self.dev else self.PROD_URL

    def as_dict(self) -> dict:
        return {
            "siteName": self.SITE_NAME,
            "siteUrl": self.SITE_URL,
            "siteTitle": self.SITE_TITLE,
            "contactMail": self.CONTACT_MAIL,
            "url": self.url,
        }


# Global config instance
config = Config()
