"""MCP tools for previewing quizzes (read-only, no server-side sessions)."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from katakana_quiz.difficulty import select_tier
from katakana_quiz.errors import InvalidModeError
from katakana_quiz.quiz_engine import QuestionGenerator


def register(mcp: FastMCP, generator: QuestionGenerator) -> None:
    @mcp.tool()
    def select_difficulty(mastered_count: int) -> dict:
        """Pick the progressive quiz tier for a number of learned characters.

        Args:
            mastered_count: How many characters the learner has marked learned
        """
        return select_tier(mastered_count).model_dump()

    @mcp.tool()
    def build_quiz(
        mode: str = "multiple-choice",
        count: int | None = None,
        mastered_count: int = 0,
    ) -> dict:
        """Generate a katakana quiz and return its questions as JSON.

        Nothing is stored on the server; each call produces a fresh random
        quiz with answers included.

        Modes:
        - name-conversion: pick the katakana spelling of a Western name
        - multiple-choice: glyph -> romanization or the reverse
        - matching: one board pairing 8 glyphs with their romanization
        - fill-blanks: complete a loanword with missing characters
        - progressive: difficulty picked from mastered_count

        Args:
            mode: Quiz mode (see above)
            count: Number of questions (default depends on the mode; ignored
                for matching and progressive)
            mastered_count: Learned-character count, used by progressive mode
        """
        try:
            questions = generator.generate(mode, count, mastered_count)
        except InvalidModeError as e:
            return {"error": str(e)}
        return {
            "mode": mode,
            "total_questions_generated": len(questions),
            "questions": [q.model_dump() for q in questions],
        }
