"""Unit tests for the widget state machine and answer formatting."""
import asyncio

import pytest

from platform_assistant.conversation import ConversationContext, Role
from platform_assistant.errors import SubmissionRejectedError, WidgetStateError
from platform_assistant.intents import IntentMatcher
from platform_assistant.resolver import ResolutionSource, ResponseResolver
from platform_assistant.ui import (
    STATUS_OFFLINE,
    STATUS_REMOTE,
    ChatWidget,
    Segment,
    WidgetState,
    parse_markup,
    render_markup,
    strip_markup,
)


def _widget(responder=None, **kwargs) -> ChatWidget:
    kwargs.setdefault("is_configured", responder is not None)
    widget = ChatWidget(ResponseResolver(responder=responder), greeting="Hi!", **kwargs)
    widget.open()
    return widget


class TestWidgetState:
    """Tests for open, close and minimize transitions."""

    def test_starts_closed_with_greeting(self):
        widget = ChatWidget(ResponseResolver())

        assert widget.state is WidgetState.CLOSED
        assert len(widget.messages) == 1
        assert widget.messages[0].role is Role.ASSISTANT
        assert "Code Migration Platform" in widget.messages[0].content

    def test_open_expands(self):
        widget = ChatWidget(ResponseResolver(), greeting="Hi!")
        widget.open()

        assert widget.state is WidgetState.EXPANDED
        assert widget.is_open

    def test_open_when_minimized_keeps_state(self):
        widget = _widget()
        widget.toggle_minimize()
        widget.open()

        assert widget.state is WidgetState.MINIMIZED

    def test_minimize_toggles(self):
        widget = _widget()

        assert widget.toggle_minimize() is WidgetState.MINIMIZED
        assert widget.is_minimized
        assert widget.toggle_minimize() is WidgetState.EXPANDED

    @pytest.mark.parametrize("minimized", [False, True])
    def test_close_from_any_open_state(self, minimized):
        widget = _widget()
        if minimized:
            widget.toggle_minimize()

        widget.close()

        assert widget.state is WidgetState.CLOSED

    def test_minimize_closed_widget_fails(self):
        widget = ChatWidget(ResponseResolver(), greeting="Hi!")
        with pytest.raises(WidgetStateError):
            widget.toggle_minimize()

    def test_status_line(self, stub_responder):
        widget = _widget(stub_responder)
        assert widget.status_line == STATUS_REMOTE

        widget.toggle_remote()
        assert widget.status_line == STATUS_OFFLINE
        assert not widget.remote_active

    def test_status_line_unconfigured(self):
        assert _widget().status_line == STATUS_OFFLINE


class TestWidgetSubmit:
    """Tests for ChatWidget.submit."""

    @pytest.mark.asyncio
    async def test_remote_answer_updates_transcript_and_context(self, stub_responder):
        widget = _widget(stub_responder)

        reply = await widget.submit("How do I start?")

        assert reply.content == "remote answer"
        assert [m.role for m in widget.messages] == [Role.ASSISTANT, Role.USER, Role.ASSISTANT]
        assert [(t.role, t.content) for t in widget.context] == [
            (Role.USER, "How do I start?"),
            (Role.ASSISTANT, "remote answer"),
        ]
        assert widget.last_resolution.source is ResolutionSource.REMOTE

    @pytest.mark.asyncio
    async def test_fallback_answer_is_recorded(self, failing_responder):
        widget = _widget(failing_responder())

        reply = await widget.submit("what can this platform do")

        assert reply.content == IntentMatcher().classify("what can this platform do")
        assert widget.last_resolution.is_fallback
        assert [t.role for t in widget.context] == [Role.USER, Role.ASSISTANT]

    @pytest.mark.asyncio
    async def test_history_excludes_current_message(self, stub_responder):
        widget = _widget(stub_responder)

        await widget.submit("first")
        await widget.submit("second")

        _, history = stub_responder.calls[-1]
        assert [t.content for t in history] == ["first", "remote answer"]

    @pytest.mark.asyncio
    async def test_history_window_is_bounded(self, stub_responder):
        widget = _widget(stub_responder)
        for i in range(5):
            await widget.submit(f"question {i}")

        _, history = stub_responder.calls[-1]
        assert len(history) == 6
        assert history[-2].content == "question 3"
        assert len(widget.context) == 10

    @pytest.mark.asyncio
    async def test_blank_input_is_ignored(self, stub_responder):
        widget = _widget(stub_responder)

        assert await widget.submit("   ") is None
        assert len(widget.messages) == 1
        assert stub_responder.calls == []

    @pytest.mark.asyncio
    async def test_submit_when_minimized_is_rejected(self):
        widget = _widget()
        widget.toggle_minimize()

        with pytest.raises(SubmissionRejectedError):
            await widget.submit("hello")

    @pytest.mark.asyncio
    async def test_submit_when_closed_is_rejected(self):
        widget = ChatWidget(ResponseResolver(), greeting="Hi!")

        with pytest.raises(SubmissionRejectedError):
            await widget.submit("hello")

    @pytest.mark.asyncio
    async def test_second_submission_rejected_while_pending(self, gated_responder):
        widget = _widget(gated_responder)

        first = asyncio.create_task(widget.submit("first question"))
        await gated_responder.started.wait()

        assert widget.awaiting_response
        assert not widget.can_submit("second question")
        with pytest.raises(SubmissionRejectedError):
            await widget.submit("second question")

        gated_responder.release.set()
        await first

        assert not widget.awaiting_response
        await widget.submit("second question")

        assert [t.content for t in widget.context] == [
            "first question",
            "answer to: first question",
            "second question",
            "answer to: second question",
        ]
        assert [call[0] for call in gated_responder.calls] == ["first question", "second question"]

    @pytest.mark.asyncio
    async def test_guard_cleared_after_unexpected_error(self):
        class _ExplodingResolver(ResponseResolver):
            async def resolve_tagged(self, *args, **kwargs):
                raise RuntimeError("bug")

        widget = ChatWidget(_ExplodingResolver(), greeting="Hi!")
        widget.open()

        with pytest.raises(RuntimeError):
            await widget.submit("hello")

        assert not widget.awaiting_response
        assert len(widget.context) == 0

    @pytest.mark.asyncio
    async def test_unconfigured_widget_never_calls_remote(self, stub_responder):
        widget = ChatWidget(
            ResponseResolver(responder=stub_responder),
            ConversationContext(),
            is_configured=False,
            greeting="Hi!",
        )
        widget.open()

        first = await widget.submit("what can this platform do")
        second = await widget.submit("what can this platform do")

        assert stub_responder.calls == []
        assert first.content == second.content
        assert "Business Logic Extractor" in first.content


class TestFormatting:
    """Tests for inline markup handling."""

    def test_parse_markup(self):
        segments = parse_markup("Use the **Code Language Converter**\nthen upload")

        assert segments == [
            Segment(text="Use the "),
            Segment(text="Code Language Converter", emphasis=True),
            Segment(text="\n", line_break=True),
            Segment(text="then upload"),
        ]

    def test_unmatched_asterisks_stay_plain(self):
        assert parse_markup("a ** b") == [Segment(text="a ** b")]

    def test_empty_text(self):
        assert parse_markup("") == []

    def test_strip_markup(self):
        assert strip_markup("**Step 1**: click\n**Step 2**") == "Step 1: click\nStep 2"

    def test_render_markup_bolds_emphasis(self):
        text = render_markup("plain **bold**")

        assert text.plain == "plain bold"
        assert any(span.style == "bold" for span in text.spans)
