"""MCP Prompts — 견적 상담용 재사용 프롬프트 템플릿.

프롬프트 목록:
  [상담]   liability_quote_intake    견적에 필요한 정보 수집
  [상담]   explain_liability_quote   산출된 견적 설명
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.prompts.base import AssistantMessage, Message, UserMessage
from mcp.types import TextContent


def _user(text: str) -> UserMessage:
    return UserMessage(content=TextContent(type="text", text=text))


def _assistant(text: str) -> AssistantMessage:
    return AssistantMessage(content=TextContent(type="text", text=text))


def register_all_prompts(mcp: FastMCP) -> int:
    """모든 프롬프트를 FastMCP에 등록. 등록된 수를 반환한다."""
    _count = 0

    def _counted_prompt(*args, **kwargs):
        nonlocal _count
        _count += 1
        return mcp.prompt(*args, **kwargs)

    @_counted_prompt(
        name="liability_quote_intake",
        description="Collect the details needed for a German personal liability quote",
    )
    def liability_quote_intake(tariff_line: str = "comfort") -> list[Message]:
        return [
            _user(
                "I would like a quote for personal liability insurance in Germany "
                f"(tariff line: {tariff_line}).\n\n"
                "Ask me only for what is still missing, in this order:\n"
                "1. Postal code (5 digits)\n"
                "2. Policy start date (YYYY-MM-DD)\n"
                "3. Family coverage? Drone coverage?\n"
                "4. Deductible: 0, 150, 300 or 500 EUR\n"
                "5. Claims in the last 5 years (0-10) and whether a previous insurer cancelled my policy\n\n"
                "Then call get_liability_quote and read me the summary.\n"
                "Reference: liability://tariffs, liability://pricing-factors"
            ),
            _assistant(
                "Happy to help. Let's start with your 5-digit postal code."
            ),
        ]

    @_counted_prompt(
        name="explain_liability_quote",
        description="Explain how a computed liability quote was priced",
    )
    def explain_liability_quote(quote_json: str) -> list[Message]:
        return [
            _user(
                "Explain this liability insurance quote in plain language:\n\n"
                f"{quote_json}\n\n"
                "Cover:\n"
                "1. Monthly and annual premium\n"
                "2. Coverage sum and tariff line\n"
                "3. Deductible and extensions (family, drones)\n"
                "4. Which factors raised or lowered the price "
                "(see liability://pricing-factors)\n"
                "5. Until when the quote is valid\n\n"
                "Do not promise cover: this is an anonymous, non-binding quote."
            ),
        ]

    return _count
