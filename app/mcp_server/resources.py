"""MCP Resources — 요율표·상품 정보를 읽기 전용 리소스로 노출."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from app.tools.data import POLICY_REFERENCE, PRICING_FACTORS, TARIFF_CATALOG, _json


def register_all_resources(mcp: FastMCP) -> int:
    """모든 리소스를 FastMCP에 등록. 등록된 수를 반환한다."""
    _count = 0

    def _counted_resource(*args, **kwargs):
        nonlocal _count
        _count += 1
        return mcp.resource(*args, **kwargs)

    # ═══ 요율 ═══

    @_counted_resource("liability://tariffs", name="tariff_catalog",
                   description="Tariff lines with base monthly premium and default coverage sum",
                   mime_type="application/json")
    def tariffs() -> str:
        return _json(TARIFF_CATALOG)

    @_counted_resource("liability://pricing-factors", name="pricing_factors",
                   description="Premium adjustments in the order they are applied",
                   mime_type="application/json")
    def pricing_factors() -> str:
        return _json(PRICING_FACTORS)

    # ═══ 레퍼런스 ═══

    @_counted_resource("liability://reference/included-risks", name="policy_reference",
                   description="Territory, currency, included risks and quote validity",
                   mime_type="application/json")
    def policy_reference() -> str:
        return _json(POLICY_REFERENCE)

    # ═══ 도구 카탈로그 ═══

    @_counted_resource("liability://tools/catalog", name="tool_catalog",
                   description="Registered tool catalog", mime_type="application/json")
    def tool_catalog() -> str:
        from app.tools import get_tool_registry
        return _json(get_tool_registry().catalog())

    return _count
