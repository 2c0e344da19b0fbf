import logging

import gradio as gr

from path_map.config import load_config
from path_map.handlers_merge import MERGE_MODES, load_merge_documents, merge_documents_handler
from path_map.handlers_paths import (
    FLATTEN_MODES,
    PATH_OPERATIONS,
    flatten_handler,
    load_document_file,
    refresh_path_choices,
    run_path_operation,
)

config = load_config()

# --- UI Definition ---
with gr.Blocks(title="PathMap Playground") as demo:
    gr.Markdown("# PathMap Playground")
    gr.Markdown("Read, write, flatten and merge nested JSON with dot paths such as `a.b.c`.")

    merge_documents_state = gr.State(value=[])

    with gr.Tab("Paths"):
        with gr.Row():
            # Left Panel: Document
            with gr.Column(scale=1):
                gr.Markdown("### 1. Document")
                document_file = gr.File(label="Upload JSON File", file_types=[".json"])
                document_text = gr.Code(label="Document", language="json", value="{}", interactive=True)
                document_status = gr.Textbox(label="Status", interactive=False)

            # Right Panel: Operation
            with gr.Column(scale=1):
                gr.Markdown("### 2. Operation")
                operation = gr.Radio(choices=PATH_OPERATIONS, value="get", label="Operation")
                path_input = gr.Dropdown(
                    label="Path (empty for the whole document; comma-separated for remove)",
                    choices=[],
                    value=None,
                    allow_custom_value=True,
                    interactive=True,
                )
                value_input = gr.Textbox(label="Value (JSON, or plain text for a string)")
                run_btn = gr.Button("Run", variant="primary")
                operation_status = gr.Textbox(label="Result Status", interactive=False)
                operation_result = gr.JSON(label="Result")

        document_file.upload(
            fn=load_document_file,
            inputs=[document_file],
            outputs=[document_text, document_status],
        )

        document_text.change(
            fn=refresh_path_choices,
            inputs=[document_text],
            outputs=[path_input],
        )

        run_btn.click(
            fn=run_path_operation,
            inputs=[document_text, operation, path_input, value_input],
            outputs=[operation_result, document_text, operation_status],
        )

    with gr.Tab("Flatten"):
        with gr.Row():
            with gr.Column(scale=1):
                flatten_text = gr.Code(label="Document", language="json", value="{}", interactive=True)
                flatten_mode = gr.Radio(choices=FLATTEN_MODES, value="dot", label="Mode")
                deep_reset = gr.Checkbox(label="Deep reset", value=False)
                flatten_btn = gr.Button("Transform", variant="primary")
            with gr.Column(scale=1):
                flatten_status = gr.Textbox(label="Status", interactive=False)
                flatten_result = gr.JSON(label="Result")
                flatten_preview = gr.Dataframe(
                    headers=["Path", "Value"],
                    datatype=["str", "str"],
                    col_count=(2, "fixed"),
                    interactive=False,
                    label=f"Leaf paths (first {config.preview_limit})",
                )

        flatten_btn.click(
            fn=lambda text, mode, deep: flatten_handler(text, mode, deep, config.preview_limit),
            inputs=[flatten_text, flatten_mode, deep_reset],
            outputs=[flatten_result, flatten_preview, flatten_status],
        )

    with gr.Tab("Merge"):
        gr.Markdown("### 1. Upload documents (merged in upload order)")
        merge_files = gr.File(label="JSON Documents", file_types=[".json"], file_count="multiple")
        merge_load_status = gr.Textbox(label="Upload Status", interactive=False)

        gr.Markdown("### 2. Configure merge")
        merge_mode = gr.Radio(
            choices=list(MERGE_MODES),
            value="extend_distinct",
            label="Merge Mode",
            info="extend merges lists position by position; extend_distinct replaces them.",
        )
        merge_filename = gr.Textbox(label="Merged Output Filename", placeholder="merged_output.json")

        gr.Markdown("### 3. Merge & export")
        merge_btn = gr.Button("Merge & Download", variant="primary")
        merge_download = gr.File(label="Merged Result")
        merge_status = gr.Textbox(label="Merge Status", interactive=False)
        merge_preview = gr.JSON(label="Merged Document")

        merge_files.upload(
            fn=load_merge_documents,
            inputs=[merge_files],
            outputs=[merge_documents_state, merge_load_status],
        )

        merge_btn.click(
            fn=merge_documents_handler,
            inputs=[merge_documents_state, merge_mode, merge_filename],
            outputs=[merge_download, merge_status, merge_preview],
        )

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    demo.launch(server_name=config.server_name, server_port=config.server_port, share=config.share)
