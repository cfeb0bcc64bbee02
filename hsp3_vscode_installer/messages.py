"""User-facing messages.

Only messages shown to the operator live here; log records stay in English.
"""

from __future__ import annotations

from typing import Dict

DEFAULT_LANG = "ja"

MESSAGES: Dict[str, Dict[str, str]] = {
    "ja": {
        "install_npm": "npm をインストールしてください。 (Node.js: https://nodejs.org/)",
        "install_code": "VSCode をインストールし、code コマンドを PATH に追加してください。",
        "install_generic": "{tool} をインストールしてください。",
        "artifact_missing": "拡張機能のパッケージ {artifact} が見つかりません。",
        "step_failed": "{step} に失敗しました (終了コード {code})。",
        "done": "拡張機能 {artifact} をインストールしました。",
    },
    "en": {
        "install_npm": "Please install npm. (Node.js: https://nodejs.org/)",
        "install_code": "Please install VSCode and add the `code` command to PATH.",
        "install_generic": "Please install {tool}.",
        "artifact_missing": "Extension package {artifact} was not found.",
        "step_failed": "{step} failed (exit code {code}).",
        "done": "Installed extension {artifact}.",
    },
}


def message(key: str, lang: str = DEFAULT_LANG, **kwargs: object) -> str:
    table = MESSAGES.get(lang) or MESSAGES[DEFAULT_LANG]
    template = table.get(key) or MESSAGES[DEFAULT_LANG][key]
    return template.format(**kwargs)


def install_hint(tool: str, lang: str = DEFAULT_LANG) -> str:
    key = f"install_{tool}"
    table = MESSAGES.get(lang) or MESSAGES[DEFAULT_LANG]
    if key in table:
        return table[key]
    return message("install_generic", lang, tool=tool)
