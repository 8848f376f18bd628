#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Streamlit app: Tap-to-Contact
- Télécharge la carte de contact en .vcf v3.0 (photo intégrée si fournie)
- Anciens iPhone/iPad (< iOS 8) : la carte est livrée dans un .ics
- Export optionnel de la carte sur disque (EXPORT_DIR)
"""
from __future__ import annotations
import os
import logging
from pathlib import Path
from typing import Optional, Dict

import requests
import streamlit as st
from dotenv import load_dotenv

from vcardkit.client import ClientCapability, capability_from_user_agent
from vcardkit.contact import from_identity
from vcardkit.utils import ensure_data_dir, load_image_bytes

APP_NAME = "Tap-to-Contact"


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


# --- Boot ---
load_dotenv()
LOGS_DIR = Path(os.getenv("LOGS_DIR", "logs"))
EXPORT_DIR = Path(os.getenv("EXPORT_DIR", "data"))
ensure_data_dir(LOGS_DIR)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[
        logging.FileHandler(LOGS_DIR / "app.log", encoding="utf-8"),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger("app")

# --- Config identité (depuis .env) ---
IDENTITY: Dict[str, str] = {
    "N_LAST": os.getenv("N_LAST", "Nom"),
    "N_FIRST": os.getenv("N_FIRST", "Prénom"),
    "ORG": os.getenv("ORG", "Votre Société"),
    "TITLE": os.getenv("TITLE", "Fonction"),
    "TEL": os.getenv("TEL", "+33 6 00 00 00 00"),
    "EMAIL": os.getenv("EMAIL", "vous@example.com"),
    "URL": os.getenv("URL", "https://www.exemple.com"),
    "ADR_STREET": os.getenv("ADR_STREET", "10 Rue Exemple"),
    "ADR_CITY": os.getenv("ADR_CITY", "Paris"),
    "ADR_PC": os.getenv("ADR_PC", "75000"),
    "ADR_COUNTRY": os.getenv("ADR_COUNTRY", "France"),
    "NOTE": os.getenv("NOTE", ""),
}
PHOTO_PATH = os.getenv("PHOTO_PATH", "assets/photo.jpg")
PHOTO_INCLUDE = _flag("PHOTO_INCLUDE", "true")
CHARSET = os.getenv("CHARSET", "utf-8")
ALLOW_EXPORT = _flag("ALLOW_EXPORT")


def _client() -> ClientCapability:
    try:
        ua = st.context.headers.get("User-Agent")
    except Exception:
        ua = None
    return capability_from_user_agent(ua)


st.set_page_config(page_title=APP_NAME, page_icon="👋", layout="centered")

st.title("Enregistrer mon contact")
st.caption("Salon / Congrès — approchez, scannez, connectons-nous 🤝")

card = from_identity(IDENTITY, charset=CHARSET)

# Photo (optionnelle)
photo_bytes: Optional[bytes] = load_image_bytes(PHOTO_PATH) if PHOTO_PATH else None
if photo_bytes:
    st.image(photo_bytes, width=140, caption=card.properties.get("FN"))
if PHOTO_PATH:
    # chemin local ou URL http(s)
    try:
        if not card.add_photo(PHOTO_PATH, include=PHOTO_INCLUDE):
            st.warning("Photo ignorée : format d'image non reconnu.")
    except (OSError, requests.RequestException) as e:
        logger.warning("Photo unavailable: %s (%s)", PHOTO_PATH, e)
        st.warning(f"Photo indisponible : {PHOTO_PATH}")

client = _client()
data = card.get_output_bytes(client)
mime = card.get_content_type(client)
file_name = card.get_download_name(client)

if st.download_button(
    label=f"📇 Sauvegarder le contact (.{card.get_file_extension(client)})",
    data=data,
    file_name=file_name,
    mime=mime,
):
    logger.info("Download: file=%s mime=%s legacy=%s", file_name, mime, client.is_legacy_mobile)

with st.expander("Voir la carte"):
    st.code(data.decode(CHARSET), language="text")

if ALLOW_EXPORT:
    if st.button("💾 Exporter sur disque"):
        try:
            path = card.save(EXPORT_DIR, client)
            st.success(f"Carte exportée : {path}")
        except OSError as e:
            logger.error("Export failed: %s", e)
            st.error(f"Export impossible : {e}")

st.caption("Astuce : scannez le QR au stand ou approchez un sticker NFC → cette page s’ouvre "
           "et vous enregistrez mon contact en 10 secondes.")
