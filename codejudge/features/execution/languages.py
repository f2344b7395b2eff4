from __future__ import annotations

from typing import Dict, List, Optional

from .schemas import LanguageInfo

# Judge0 language ids; extend by adding entries
LANGUAGE_MAP: Dict[str, LanguageInfo] = {
    "javascript": LanguageInfo(key="javascript", id=63, name="JavaScript (Node.js 12.14.0)"),
    "python": LanguageInfo(key="python", id=71, name="Python (3.8.1)"),
    "java": LanguageInfo(key="java", id=62, name="Java (OpenJDK 13.0.1)"),
}


def get_language(key: str) -> Optional[LanguageInfo]:
    return LANGUAGE_MAP.get(key)


def supported_languages() -> List[LanguageInfo]:
    return list(LANGUAGE_MAP.values())
