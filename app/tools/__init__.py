"""LangChain 도구 모음 — ToolRegistry가 도구 모듈의 TOOLS를 모아 MCP 서버에 넘긴다.

새 도구 추가 시:
  1. 해당 모듈에 도구 함수 작성 (args_schema 필수)
  2. 모듈 하단 TOOLS 리스트에 추가
  (새 모듈이면 _TOOL_MODULES에 모듈 추가)
"""

from __future__ import annotations

import logging
import threading

from langchain_core.tools import BaseTool

from app.tools import liability

logger = logging.getLogger("liability.tools.registry")

_TOOL_MODULES = [liability]


class ToolRegistry:
    """도구 이름 → BaseTool 레지스트리. 서버 시작 시 도구 모듈에서 한 번 로드한다."""

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}

    # ── 조회 ──────────────────────────────────────────────────

    def get_all(self) -> tuple[BaseTool, ...]:
        return tuple(self._tools.values())

    def get_by_name(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def __len__(self) -> int:
        return len(self._tools)

    def catalog(self) -> list[dict]:
        """도구 이름·설명·인자 스키마 목록 (MCP 리소스용)."""
        return [
            {
                "name": t.name,
                "description": t.description,
                "parameters": t.args_schema.model_json_schema() if t.args_schema else {},
            }
            for t in self.get_all()
        ]

    # ── 초기 로드 ────────────────────────────────────────────

    def load_from_modules(self) -> None:
        """_TOOL_MODULES에서 도구를 일괄 수집하여 등록."""
        tools: list[BaseTool] = []
        for mod in _TOOL_MODULES:
            tools.extend(getattr(mod, "TOOLS", []))
        for t in tools:
            # MCP 시그니처를 args_schema에서 만들기 때문에 스키마 없는 도구는 받지 않는다
            if t.args_schema is None:
                raise ValueError(f"Tool {t.name!r} has no args_schema")
        self._tools.update((t.name, t) for t in tools)
        logger.info("Loaded %d tools", len(tools))


# ── 싱글톤 ────────────────────────────────────────────────────

_registry: ToolRegistry | None = None
_registry_lock = threading.Lock()


def get_tool_registry() -> ToolRegistry:
    """ToolRegistry 싱글톤을 반환한다. 최초 생성 시 도구 모듈을 로드한다."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                registry = ToolRegistry()
                registry.load_from_modules()
                _registry = registry
    return _registry


def get_all_tools() -> tuple[BaseTool, ...]:
    return get_tool_registry().get_all()
