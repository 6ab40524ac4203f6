"""Upload de arquivo de voz e reconhecimento de fala."""

from __future__ import annotations

import logging
from pathlib import Path

from config.settings.wechat_mp import WECHAT_API_BASE_URL
from connectors.http_base import HttpClient

from .errors import WeChatApiError, parse_wechat_response
from .models import LANGUAGE_ZH_CN, VOICE_FORMATS, VOICE_LANGUAGES

logger: logging.Logger = logging.getLogger(__name__)

MEDIA_UPLOAD_PATH = "/cgi-bin/media/upload"
VOICE_RECOGNIZE_PATH = "/cgi-bin/media/voice/recognize"
DEFAULT_MAX_VOICE_BYTES = 2 * 1024 * 1024

_CONTENT_TYPES = {
    "amr": "audio/amr",
    "speex": "audio/speex",
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
}


def validate_voice_file(
    path: str | Path, max_size_bytes: int = DEFAULT_MAX_VOICE_BYTES
) -> Path:
    """Confere que o caminho é um arquivo não vazio dentro do limite.

    Raises:
        FileNotFoundError: Arquivo inexistente
        IsADirectoryError: Caminho aponta para diretório
        ValueError: Arquivo vazio ou maior que max_size_bytes
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"voice file not found: {file_path}")
    if file_path.is_dir():
        raise IsADirectoryError(f"voice path is a directory: {file_path}")
    size = file_path.stat().st_size
    if size == 0:
        raise ValueError("voice file is empty")
    if size > max_size_bytes:
        raise ValueError(f"voice file too large: {size} bytes (max {max_size_bytes})")
    return file_path


async def upload_voice_file(
    path: str | Path,
    access_token: str,
    fmt: str = "amr",
    *,
    http_client: HttpClient | None = None,
    base_url: str = WECHAT_API_BASE_URL,
    max_size_bytes: int = DEFAULT_MAX_VOICE_BYTES,
) -> str:
    """Envia arquivo como mídia temporária do tipo voice. Devolve media_id."""
    if not access_token:
        raise ValueError("access_token is required")
    if fmt not in VOICE_FORMATS:
        raise ValueError(f"unsupported voice format: {fmt}")
    file_path = validate_voice_file(path, max_size_bytes)

    http = http_client or HttpClient()
    response = await http.post(
        f"{base_url.rstrip('/')}{MEDIA_UPLOAD_PATH}",
        params={"access_token": access_token, "type": "voice"},
        files={
            "media": (file_path.name, file_path.read_bytes(), _CONTENT_TYPES[fmt]),
        },
    )
    data = parse_wechat_response(response, "media_upload")
    media_id = str(data.get("media_id") or "")
    if not media_id:
        raise WeChatApiError(-1, "empty media_id", response.status_code)
    logger.info("wechat_voice_uploaded", extra={"format": fmt})
    return media_id


async def recognize_voice(
    media_id: str,
    access_token: str,
    language: str = LANGUAGE_ZH_CN,
    *,
    http_client: HttpClient | None = None,
    base_url: str = WECHAT_API_BASE_URL,
) -> str:
    """Reconhece a fala de uma mídia enviada. Devolve o texto."""
    if not media_id:
        raise ValueError("media_id is required")
    if not access_token:
        raise ValueError("access_token is required")
    if language not in VOICE_LANGUAGES:
        raise ValueError(f"unsupported language: {language}")

    http = http_client or HttpClient()
    response = await http.post(
        f"{base_url.rstrip('/')}{VOICE_RECOGNIZE_PATH}",
        params={"access_token": access_token},
        json={"media_id": media_id, "lang": language},
    )
    data = parse_wechat_response(response, "voice_recognize")
    return str(data.get("text") or "")
