"""Merkezi .env yükleyici. Ayarları okuyan modüller bunu import etsin."""
from pathlib import Path

from dotenv import load_dotenv

# Proje kökündeki .env dosyasını bul ve yükle; ortamda zaten olan değerler korunur
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)
