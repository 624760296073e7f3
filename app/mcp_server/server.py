"""MCP Server — FastMCP 기반 배상책임보험 견적 도구 서버.

LangChain 도구를 FastMCP에 동적 등록한다.

IO Adapter 역할:
  - tool 카탈로그 조회  → register_all_tools()
  - tool 호출           → _make_handler()
  - 결과 정규화         → JSON string 반환
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Literal

from mcp.server.fastmcp import FastMCP

from app.config import get_settings
from app.tools import get_all_tools
from app.tools.data import _json

logger = logging.getLogger("liability.mcp_server")

Transport = Literal["stdio", "sse", "streamable-http"]

_TYPE_MAP = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "array": list,
    "object": dict,
    "null": type(None),
}

# ── 싱글톤 FastMCP 인스턴스 ───────────────────────────────────────────────────

_mcp: FastMCP | None = None


def get_mcp(**overrides: Any) -> FastMCP:
    """싱글톤 FastMCP 인스턴스를 반환.

    최초 호출 시 Settings 값으로 생성하며,
    overrides(host, port, …)로 개별 설정을 덮어쓸 수 있다.
    """
    global _mcp
    if _mcp is None:
        s = get_settings()
        _mcp = FastMCP(
            overrides.get("name", s.mcp_server_name),
            host=overrides.get("host", s.mcp_host),
            port=overrides.get("port", s.mcp_port),
        )
    return _mcp


# ── Tool 등록 헬퍼 ────────────────────────────────────────────────────────────

def _resolve_json_type(pinfo: dict) -> tuple[str, bool]:
    """JSON Schema 프로퍼티에서 타입명과 nullable 여부를 추출.

    단순 {"type": "string"} 외에도 Optional 필드의
    {"anyOf": [{"type": "integer"}, {"type": "null"}]} 형태를 처리한다.
    """
    if "type" in pinfo:
        return pinfo["type"], False
    any_of = pinfo.get("anyOf", [])
    nullable = any(item.get("type") == "null" for item in any_of)
    for item in any_of:
        t = item.get("type")
        if t and t != "null":
            return t, nullable
    return "string", nullable


def _default_for(py_type: type) -> Any:
    if py_type is str:
        return ""
    if py_type is bool:
        return False
    if py_type in (int, float):
        return 0
    return []


def _build_signature_from_tool(t) -> tuple[inspect.Signature, dict[str, Any]]:
    schema = t.args_schema.model_json_schema() if t.args_schema else {}
    properties = schema.get("properties", {})
    required = set(schema.get("required", []))
    annotations: dict[str, Any] = {"return": str}

    required_params, optional_params = [], []
    for pname, pinfo in properties.items():
        json_type, nullable = _resolve_json_type(pinfo)
        py_type = _TYPE_MAP.get(json_type, str)
        annotation = py_type | None if nullable else py_type
        annotations[pname] = annotation

        if pname in required:
            required_params.append(inspect.Parameter(
                pname, inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=annotation,
            ))
        else:
            default = pinfo.get("default", None if nullable else _default_for(py_type))
            optional_params.append(inspect.Parameter(
                pname, inspect.Parameter.POSITIONAL_OR_KEYWORD, default=default, annotation=annotation,
            ))

    return inspect.Signature(required_params + optional_params, return_annotation=str), annotations


def _to_field_names(tool_obj, kwargs: dict[str, Any]) -> dict[str, Any]:
    """args_schema 별칭(camelCase)으로 받은 인자를 도구 함수의 파라미터명으로 바꾼다."""
    if tool_obj.args_schema is None:
        return kwargs
    return tool_obj.args_schema.model_validate(kwargs).model_dump()


def _make_handler(tool_obj):
    async def handler(**kwargs: Any) -> str:
        try:
            args = _to_field_names(tool_obj, kwargs)
            result = await asyncio.to_thread(tool_obj.invoke, args)
            return result if isinstance(result, str) else _json(result)
        except Exception as e:
            logger.warning("Tool %s rejected arguments: %s", tool_obj.name, e)
            return _json({"success": False, "error": str(e)})
    return handler


def register_all_tools(mcp: FastMCP) -> int:
    tools = get_all_tools()
    for t in tools:
        handler = _make_handler(t)
        sig, annotations = _build_signature_from_tool(t)

        handler.__name__ = t.name
        handler.__doc__ = t.description
        handler.__signature__ = sig
        handler.__annotations__ = annotations

        mcp.add_tool(handler, name=t.name, description=t.description)

    logger.info("Registered %d tools to FastMCP server", len(tools))
    return len(tools)


# ── 초기화 & 실행 ─────────────────────────────────────────────────────────────

_initialized = False


def init_mcp(**overrides: Any) -> FastMCP:
    """MCP 서버에 도구·리소스·프롬프트를 등록한다. 최초 1회만 실행."""
    global _initialized
    mcp = get_mcp(**overrides)

    if _initialized:
        return mcp
    _initialized = True

    register_all_tools(mcp)

    from app.mcp_server.resources import register_all_resources
    from app.mcp_server.prompts import register_all_prompts

    rc = register_all_resources(mcp)
    logger.info("Registered %d resources to FastMCP server", rc)

    pc = register_all_prompts(mcp)
    logger.info("Registered %d prompts to FastMCP server", pc)

    return mcp


_TRANSPORT_RUNNERS = {
    "sse": "run_sse_async",
    "stdio": "run_stdio_async",
    "streamable-http": "run_streamable_http_async",
}


async def run_mcp_server(
    transport: Transport | None = None,
    **overrides: Any,
) -> None:
    """MCP 서버를 시작한다.

    Args:
        transport: "sse" | "stdio" | "streamable-http". None이면 Settings 값 사용.
        **overrides: get_mcp()에 전달할 host/port/name 오버라이드.
    """
    mcp = init_mcp(**overrides)
    s = get_settings()

    transport = transport or s.mcp_transport  # type: ignore[assignment]
    runner_name = _TRANSPORT_RUNNERS.get(transport, "run_stdio_async")  # type: ignore[arg-type]

    logger.info(
        "Starting MCP server (transport=%s, host=%s, port=%s)...",
        transport, mcp.settings.host, mcp.settings.port,
    )

    runner = getattr(mcp, runner_name)
    await runner()
