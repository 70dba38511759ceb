import gradio as gr

from values_schema.config import load_settings
from values_schema.handlers import (
    generate_schema_handler,
    load_overrides_handler,
    load_values_handler,
)
from values_schema.logging_config import configure_logging

settings = load_settings()
configure_logging(settings.debug)

# --- UI Definition ---
with gr.Blocks(title="Values Schema Generator") as demo:
    gr.Markdown("# Values Schema Generator")
    gr.Markdown(
        "Upload a chart's values.yaml and, optionally, an overrides file to generate a "
        "values.schema.json. Keys are marked required when the values file gives them a "
        "non-empty default, unless they belong to a component with `enabled: false`."
    )

    # State
    values_state = gr.State()
    overrides_state = gr.State()

    with gr.Row():
        # Left Panel: Inputs
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            values_input = gr.File(label="Upload values.yaml", file_types=[".yaml", ".yml"])
            values_status = gr.Textbox(label="Values Status", interactive=False)
            overrides_input = gr.File(label="Upload Overrides (optional)", file_types=[".yaml", ".yml"])
            overrides_status = gr.Textbox(label="Overrides Status", interactive=False)

            gr.Markdown("### 2. Options")
            verbose_toggle = gr.Checkbox(label="Log required-field decisions", value=settings.debug)
            max_depth_input = gr.Number(
                label="Maximum nesting depth (0 = unbounded)",
                value=settings.max_depth or 0,
                precision=0,
            )
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder=settings.output)

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 3. Generate")
            generate_btn = gr.Button("Generate Schema", variant="primary")
            generate_status = gr.Textbox(label="Status", interactive=False)
            field_count = gr.Textbox(label="Field Count", interactive=False)
            download_output = gr.File(label="Download Schema")
            schema_preview = gr.JSON(label="Schema Preview")

    values_input.upload(
        fn=load_values_handler,
        inputs=[values_input],
        outputs=[values_state, values_status, schema_preview, download_output, field_count],
    )

    overrides_input.upload(
        fn=load_overrides_handler,
        inputs=[overrides_input],
        outputs=[overrides_state, overrides_status],
    )

    overrides_input.clear(
        fn=load_overrides_handler,
        inputs=[overrides_input],
        outputs=[overrides_state, overrides_status],
    )

    generate_btn.click(
        fn=generate_schema_handler,
        inputs=[values_state, overrides_state, verbose_toggle, output_filename, max_depth_input],
        outputs=[schema_preview, download_output, generate_status, field_count],
    )

if __name__ == "__main__":
    demo.launch()
