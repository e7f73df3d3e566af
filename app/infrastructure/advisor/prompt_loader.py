"""
Prompt loader for the AI advisor.

Loads named system/user prompt templates from YAML. Templates use
str.format placeholders, e.g. "{symbol}".
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from app.domain.advisor.ports import PromptCatalog

logger = logging.getLogger(__name__)

DEFAULT_PROMPTS_PATH = Path(__file__).parent / "prompts.yaml"


class PromptLoader(PromptCatalog):
    """Load and render prompts from a YAML file.

    The file maps a prompt name to a `system` and a `user_template` entry.
    A missing file is a deployment error and raises at startup.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        self.config_path = Path(config_path) if config_path else DEFAULT_PROMPTS_PATH
        self.prompts = self._load_prompts()

    def _load_prompts(self) -> dict[str, Any]:
        with open(self.config_path, "r", encoding="utf-8") as f:
            prompts = yaml.safe_load(f) or {}
        logger.info("Loaded %d prompts from %s", len(prompts), self.config_path)
        return prompts

    def _entry(self, name: str) -> dict[str, str]:
        try:
            return self.prompts[name]
        except KeyError:
            raise KeyError(f"Unknown prompt: {name}") from None

    def system(self, name: str, /, **values: Any) -> str:
        return self._entry(name).get("system", "").format(**values).strip()

    def user(self, name: str, /, **values: Any) -> str:
        return self._entry(name).get("user_template", "").format(**values).strip()


_prompt_loader: Optional[PromptLoader] = None


def get_prompt_loader() -> PromptLoader:
    """Get global prompt loader instance."""
    global _prompt_loader
    if _prompt_loader is None:
        _prompt_loader = PromptLoader()
    return _prompt_loader
