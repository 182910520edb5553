"""MCP tools for browsing the katakana reference table."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from katakana_quiz.bank import QuestionBank


def register(mcp: FastMCP, bank: QuestionBank) -> None:
    @mcp.tool()
    def list_characters(query: str = "", category: str | None = None) -> list[dict]:
        """List katakana characters with their romanization and category.

        Args:
            query: Optional text matched against the glyph or romanization
                (e.g. "ka", "シ")
            category: Optional category tag (e.g. "basic", "k-sounds", "n-sound")
        """
        return [
            {"glyph": c.glyph, "romanization": c.romanization, "category": c.category}
            for c in bank.search(query, category)
        ]

    @mcp.tool()
    def lookup_character(glyph: str) -> dict:
        """Look up one katakana character, including its stroke segments.

        Strokes are (x1, y1, x2, y2) line segments on a 200x200 grid, in
        writing order.

        Args:
            glyph: A single katakana character (e.g. "ア")
        """
        char = bank.get_character(glyph)
        if char is None:
            return {"error": f"Unknown character: {glyph}"}
        return char.model_dump()

    @mcp.tool()
    def list_categories() -> list[dict]:
        """List the eleven phonetic categories used to group characters."""
        return [c.model_dump() for c in bank.list_categories()]
