"""Tipos da API da conta oficial WeChat."""

from __future__ import annotations

from dataclasses import dataclass

FORMAT_AMR = "amr"
FORMAT_SPEEX = "speex"
FORMAT_MP3 = "mp3"
FORMAT_WAV = "wav"
VOICE_FORMATS: tuple[str, ...] = (FORMAT_AMR, FORMAT_SPEEX, FORMAT_MP3, FORMAT_WAV)

LANGUAGE_ZH_CN = "zh_CN"
LANGUAGE_EN_US = "en_US"
VOICE_LANGUAGES: tuple[str, ...] = (LANGUAGE_ZH_CN, LANGUAGE_EN_US)


@dataclass(frozen=True)
class AccessToken:
    """access_token e validade em segundos."""

    token: str
    expires_in: int


@dataclass(frozen=True)
class MiniProgram:
    """Destino mini programa de uma mensagem de template."""

    appid: str
    pagepath: str
