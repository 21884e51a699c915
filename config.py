import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Depo Ayarları
    max_books: int = int(os.getenv("LIBRARY_MAX_BOOKS", "5"))

    # CLI Ayarları
    output_mode: str = os.getenv("LIBRARY_CLI_OUTPUT", "plain")

    # Günlük Ayarları
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Uygulama Ayarları
    app_name: str = os.getenv("APP_NAME", "Book Management System")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")


settings = Settings()
