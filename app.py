import gradio as gr
import time
import threading
import logging
from agent import run_check
from advisor.errors import ValidationError
from advisor.models import HardwareDescriptor
from advisor.output_presentation import render_error_html, render_verdict_html
from advisor.validation import validate_descriptor

logger = logging.getLogger(__name__)

# ---------------------------
# Global Logging Buffer Setup
# ---------------------------
LOG_BUFFER = []
LOG_BUFFER_LOCK = threading.Lock()

class BufferLogHandler(logging.Handler):
    def emit(self, record):
        log_entry = self.format(record)
        with LOG_BUFFER_LOCK:
            LOG_BUFFER.append(log_entry)

# Attach the custom logging handler if not already attached.
root_logger = logging.getLogger()
if not any(isinstance(h, BufferLogHandler) for h in root_logger.handlers):
    handler = BufferLogHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    root_logger.addHandler(handler)

def filter_logs(logs):
    """
    Collapses runs of httpx "HTTP Request:" lines into a single
    "Contacting remote evaluator..." entry.
    """
    filtered = []
    last_was_request = False
    for log in logs:
        if "HTTP Request:" in log:
            if not last_was_request:
                filtered.append("Contacting remote evaluator...")
                last_was_request = True
        else:
            filtered.append(log)
            last_was_request = False
    return filtered

# ---------------------------
# Title & Description
# ---------------------------
title = """
<div style="text-align: center; margin-top: 20px;">
  <h1 style="font-size: 36px;">🍏 Hackintosh Compatibility Check</h1>
  <p style="font-size: 18px; color: #555; margin-top: 10px;">
    Tell us what is inside your PC and get a quick compatibility verdict.
  </p>
</div>
"""

description = """<p align="center">
Pick your CPU brand and type the CPU model, motherboard and graphics card as they appear on the box.<br/>
The verdict lists recommended macOS versions, known issues and configuration tips.
</p>"""

BRANDS = ["Intel", "AMD"]

# ---------------------------
# Background Check Runner
# ---------------------------
def run_workflow(fields, result_container):
    try:
        result_container["result"] = run_check(*fields)
    except Exception as e:
        result_container["error"] = e

def stream_compatibility_check(cpu_brand, cpu_model, motherboard, graphics_card):
    """Yields (status markdown, log details html, result html) while the check runs."""
    fields = (cpu_brand or "", cpu_model or "", motherboard or "", graphics_card or "")
    try:
        validate_descriptor(HardwareDescriptor(*fields))
    except ValidationError as e:
        yield "", "", gr.update(value=render_error_html(str(e)), visible=True)
        return

    with LOG_BUFFER_LOCK:
        LOG_BUFFER.clear()
    logger.info(f"Checking {fields[0]} {fields[1]} / {fields[2]} / {fields[3]}")
    result_container = {}
    workflow_thread = threading.Thread(target=run_workflow, args=(fields, result_container))
    workflow_thread.start()

    last_index = 0
    while workflow_thread.is_alive():
        with LOG_BUFFER_LOCK:
            new_logs = LOG_BUFFER[last_index:]
            last_index = len(LOG_BUFFER)
        if new_logs:
            yield filter_logs(new_logs)[-1], gr.update(), gr.update()
        time.sleep(0.2)

    workflow_thread.join()
    if "error" in result_container:
        raise result_container["error"]

    with LOG_BUFFER_LOCK:
        final_logs = filter_logs(LOG_BUFFER[:])
    final_status = final_logs[-1] if final_logs else "Check completed."
    result = result_container["result"]
    yield final_status, "<br/>".join(final_logs), gr.update(value=render_verdict_html(result["verdict"]), visible=True)

def reset_check():
    # Clears all four fields and hides the result card.
    return None, "", "", "", "", "", gr.update(value="", visible=False)

# ---------------------------
# App UI Setup
# ---------------------------
with gr.Blocks(title="Hackintosh Compatibility Check") as demo:
    gr.HTML(title)
    gr.HTML(description)

    with gr.Column(elem_id="main_container"):
        cpu_brand = gr.Dropdown(choices=BRANDS, label="CPU Brand", value=None)
        cpu_model = gr.Textbox(label="CPU Model", placeholder="e.g. Core i7-9700K or Ryzen 5 3600")
        motherboard = gr.Textbox(label="Motherboard", placeholder="e.g. Gigabyte Z390 Aorus Pro")
        graphics_card = gr.Textbox(label="Graphics Card", placeholder="e.g. AMD Radeon RX 580")
        with gr.Row():
            check_button = gr.Button("Check Compatibility", variant="primary")
            reset_button = gr.Button("Check Another Configuration")
        # Latest log line as status, full log stream as details.
        status_display = gr.Markdown("")
        detail_display = gr.HTML("")
        output_html = gr.HTML(visible=False)

    form_inputs = [cpu_brand, cpu_model, motherboard, graphics_card]

    check_button.click(
        fn=stream_compatibility_check,
        inputs=form_inputs,
        outputs=[status_display, detail_display, output_html],
        api_name="check_compatibility",
        show_progress="full"
    )

    reset_button.click(
        fn=reset_check,
        inputs=[],
        outputs=form_inputs + [status_display, detail_display, output_html],
        queue=False
    )

if __name__ == "__main__":
    demo.queue(max_size=10).launch()
