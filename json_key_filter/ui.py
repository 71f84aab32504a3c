from __future__ import annotations

from functools import partial

import gradio as gr

from .handlers import (
    deselect_all_handler,
    download_handler,
    expand_handler,
    load_json_handler,
    search_handler,
    select_all_handler,
    toggle_key_handler,
)
from .session import FilterSession


def build_demo() -> gr.Blocks:
    with gr.Blocks(title="JSON Key Filter") as demo:
        gr.Markdown("# JSON Side-by-Side Filter")
        gr.Markdown("Upload a JSON file, untick the keys you do not need and download the filtered result.")

        # State
        session_state = gr.State(value=FilterSession())

        with gr.Row():
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            with gr.Column():
                status_msg = gr.Textbox(label="Status", interactive=False)
                download_btn = gr.Button("Download Filtered", variant="primary", interactive=False)
                download_output = gr.File(label="Download Result")

        with gr.Row():
            # Left: original document
            with gr.Column(scale=1):
                original_view = gr.JSON(label="Original JSON")

            # Center: key tree
            with gr.Column(scale=1):
                gr.Markdown("### Filter Keys")
                search_box = gr.Textbox(label="Search keys", placeholder="Search keys...")
                with gr.Row():
                    select_all_btn = gr.Button("Select All", size="sm")
                    deselect_all_btn = gr.Button("Deselect All", size="sm")

                @gr.render(inputs=[session_state], triggers=[demo.load, session_state.change])
                def render_key_tree(session):
                    if session is None or not session.loaded:
                        gr.Markdown("Upload a JSON file to begin.")
                        return

                    nodes = session.display_tree()
                    if not nodes:
                        gr.Markdown("No keys match the search.")
                        return

                    def recursive_ui(node):
                        cb = gr.Checkbox(label=node.label, value=node.selected, container=False)
                        cb.input(
                            fn=partial(toggle_key_handler, node.path),
                            inputs=[session_state],
                            outputs=[session_state, filtered_view, status_msg],
                        )
                        if not node.has_children:
                            return

                        with gr.Accordion(f"{node.label} ({len(node.children)})", open=node.expanded) as acc:
                            for child in node.children:
                                recursive_ui(child)
                        acc.expand(fn=partial(expand_handler, node.path, True), inputs=[session_state], outputs=[session_state])
                        acc.collapse(fn=partial(expand_handler, node.path, False), inputs=[session_state], outputs=[session_state])

                    for node in nodes:
                        recursive_ui(node)

            # Right: filtered document
            with gr.Column(scale=1):
                filtered_view = gr.JSON(label="Filtered JSON")

        load_outputs = [session_state, status_msg, original_view, filtered_view, download_output, download_btn]

        file_input.upload(
            fn=load_json_handler,
            inputs=[file_input],
            outputs=load_outputs,
        ).then(fn=lambda: "", outputs=[search_box])

        file_input.clear(
            fn=load_json_handler,
            inputs=[file_input],
            outputs=load_outputs,
        )

        search_box.change(
            fn=search_handler,
            inputs=[search_box, session_state],
            outputs=[session_state],
        )

        select_all_btn.click(
            fn=select_all_handler,
            inputs=[session_state],
            outputs=[session_state, filtered_view, status_msg],
        )

        deselect_all_btn.click(
            fn=deselect_all_handler,
            inputs=[session_state],
            outputs=[session_state, filtered_view, status_msg],
        )

        download_btn.click(
            fn=download_handler,
            inputs=[session_state],
            outputs=[download_output, status_msg],
        )

    return demo
