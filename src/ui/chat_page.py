"""NiceGUI chat page for the math tutor."""

from nicegui import events, ui

from src.conversation.controller import ConversationController
from src.models.schemas import Message, Role
from src.rendering.math_renderer import MathRenderer
from src.tutor.prompts import TUTOR_NAME, TUTOR_TAGLINE

KATEX_VERSION = "0.16.11"

CUSTOM_CSS = f"""
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<link rel="stylesheet"
      href="https://cdn.jsdelivr.net/npm/katex@{KATEX_VERSION}/dist/katex.min.css">
<script defer src="https://cdn.jsdelivr.net/npm/katex@{KATEX_VERSION}/dist/katex.min.js"
        onload="typesetTutorMath()"></script>
<script>
    window.typesetTutorMath = function () {{
        if (!window.katex) return;
        document.querySelectorAll('span.tutor-math').forEach(function (el) {{
            if (el.dataset.typeset) return;
            katex.render(el.textContent, el, {{
                displayMode: el.dataset.display === 'true',
                throwOnError: false,
            }});
            el.dataset.typeset = 'true';
        }});
    }};
</script>
<style>
    * {{ font-family: 'Inter', sans-serif; }}

    body {{ background: #f1f5f9; min-height: 100vh; }}

    .app-container {{
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }}

    .header {{ background: #4f46e5; }}

    .message-user {{
        background: #4f46e5;
        color: white;
        border-radius: 18px 4px 18px 18px;
    }}

    .message-assistant {{
        background: white;
        color: #1e293b;
        border: 1px solid #e2e8f0;
        border-radius: 4px 18px 18px 18px;
    }}

    .typing-dot {{
        width: 8px; height: 8px;
        background: #818cf8;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }}
    .typing-dot:nth-child(2) {{ animation-delay: 0.2s; }}
    .typing-dot:nth-child(3) {{ animation-delay: 0.4s; }}

    @keyframes bounce {{
        0%, 60%, 100% {{ transform: translateY(0); }}
        30% {{ transform: translateY(-6px); }}
    }}

    .input-box {{
        background: #f1f5f9;
        border-radius: 16px;
        transition: background 0.2s;
    }}
    .input-box:focus-within {{ background: white; box-shadow: 0 0 0 2px #6366f1; }}

    .katex-display {{ margin: 0.5rem 0; overflow-x: auto; }}
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each page load starts a fresh conversation."""
    ui.add_head_html(CUSTOM_CSS)
    conversation = ConversationController()
    renderer = MathRenderer()

    scroll_area: ui.scroll_area
    messages_container: ui.column
    preview_container: ui.row
    send_btn: ui.button
    why_btn: ui.button
    next_btn: ui.button
    upload: ui.upload

    def render_message(msg: Message) -> None:
        is_user = msg.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with (
            ui.row().classes(f"w-full {align}"),
            ui.column().classes(f"max-w-[85%] px-4 py-3 gap-3 shadow-sm {bubble}"),
        ):
            for part in msg.parts:
                if part.image:
                    ui.image(part.image).classes("rounded-lg w-64 max-w-full")
                if part.text:
                    ui.html(renderer.render(part.text), sanitize=False).classes(
                        "text-sm leading-relaxed"
                    )

    def render_thinking_indicator() -> None:
        with (
            ui.row().classes("w-full justify-start"),
            ui.element("div").classes("message-assistant px-4 py-3 shadow-sm"),
            ui.row().classes("items-center gap-3"),
        ):
            with ui.row().classes("gap-1"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")
            ui.label(f"{TUTOR_NAME} is thinking deeply...").classes(
                "text-sm text-slate-500 italic"
            )

    def render_preview() -> None:
        preview_container.clear()
        if not conversation.selected_image:
            preview_container.set_visibility(False)
            return
        preview_container.set_visibility(True)
        with preview_container, ui.element("div").classes("relative"):
            ui.image(conversation.selected_image).classes(
                "w-24 h-24 rounded-lg border-2 border-indigo-500 shadow-md"
            )
            ui.button(icon="close", on_click=conversation.clear_image).props(
                "round dense size=xs color=red"
            ).classes("absolute -top-2 -right-2")

    def update_controls() -> None:
        send_btn.set_enabled(conversation.can_send())
        why_btn.set_enabled(conversation.nudges_enabled)
        next_btn.set_enabled(conversation.nudges_enabled)

    def refresh() -> None:
        messages_container.clear()
        with messages_container:
            for msg in conversation.messages:
                render_message(msg)
            if conversation.is_awaiting_response:
                render_thinking_indicator()
        render_preview()
        update_controls()
        ui.run_javascript("setTimeout(typesetTutorMath, 50)")
        scroll_area.scroll_to(percent=1.0)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        conversation.select_image(await e.file.read(), e.file.content_type)
        upload.reset()

    async def send_message() -> None:
        await conversation.send()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-4xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                with ui.element("div").classes(
                    "w-10 h-10 bg-indigo-400 rounded-full flex items-center justify-center"
                ):
                    ui.label("🎓").classes("text-xl")
                with ui.column().classes("gap-0"):
                    ui.label(TUTOR_NAME).classes("text-lg font-bold text-white leading-tight")
                    ui.label(TUTOR_TAGLINE).classes("text-xs text-indigo-100 italic")
            ui.label("Thinking Mode Active").classes(
                "text-xs text-white bg-indigo-500/50 px-2 py-1 rounded-full "
                "border border-indigo-400 max-sm:hidden"
            )

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full bg-slate-50") as scroll_area,
            ui.column().classes("w-full p-4"),
        ):
            messages_container = ui.column().classes("w-full gap-6")

        # Input
        with ui.column().classes("w-full p-4 gap-3 bg-white border-t"):
            preview_container = ui.row()

            with ui.row().classes("gap-2"):
                why_btn = ui.button(
                    "💡 Why did we do that?", on_click=conversation.ask_why
                ).props("rounded outline no-caps color=positive size=sm")
                next_btn = ui.button(
                    "🧭 Next step, please", on_click=conversation.next_step
                ).props("rounded outline no-caps color=warning size=sm")

            with ui.row().classes("w-full items-center gap-2 no-wrap"):
                upload = (
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                    .props("accept=image/*")
                    .classes("hidden")
                )
                ui.button(
                    icon="photo_camera", on_click=lambda: upload.run_method("pickFiles")
                ).props("flat round color=grey-7").tooltip("Upload photo")

                with ui.element("div").classes("flex-grow input-box px-3"):
                    (
                        ui.input(
                            placeholder="Type your math question...",
                            on_change=lambda _: update_controls(),
                        )
                        .bind_value(conversation, "draft_text")
                        .props("borderless dense")
                        .classes("w-full")
                        .on("keydown.enter", send_message)
                    )
                send_btn = ui.button(icon="send", on_click=send_message).props(
                    "round unelevated color=indigo"
                )

    conversation.subscribe(refresh)
    refresh()


def main() -> None:
    ui.run(title=TUTOR_NAME, favicon="🎓", port=8080, reload=False)


if __name__ == "__main__":
    main()
