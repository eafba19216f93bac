import logging
from pathlib import Path
from typing import Any, Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv
from langgraph.graph import START, END, StateGraph

from advisor.models import HardwareDescriptor, Verdict

# ---------------------------
# Import node functions
# ---------------------------
from advisor.validation import validate_descriptor, validate_input
from advisor.evaluation import evaluate_compatibility
from advisor.output_presentation import output_presentation

# ---------------------------
# Logging & Environment Setup
# ---------------------------
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

dotenv_path = Path(__file__).resolve().parent / ".env"
if dotenv_path.exists():
    load_dotenv(dotenv_path)

# ---------------------------
# State
# ---------------------------
@dataclass(kw_only=True)
class AgentState:
    cpu_brand: str = field(default="")
    cpu_model: str = field(default="")
    motherboard: str = field(default="")
    graphics_card: str = field(default="")
    hardware: Optional[HardwareDescriptor] = field(default=None)
    verdict: Optional[Verdict] = field(default=None)
    evaluator: str = field(default="")                   # "static", "proxy" or "llm"
    final_results: str = field(default="")

@dataclass(kw_only=True)
class AgentStateInput:
    cpu_brand: str = field(default="")
    cpu_model: str = field(default="")
    motherboard: str = field(default="")
    graphics_card: str = field(default="")

@dataclass(kw_only=True)
class AgentStateOutput:
    verdict: Optional[Verdict] = field(default=None)
    evaluator: str = field(default="")
    final_results: str = field(default="")

# -------------------------------------------------------
# Build & Compile the Workflow Graph
# -------------------------------------------------------
builder = StateGraph(
    AgentState,
    input_schema=AgentStateInput,
    output_schema=AgentStateOutput,
)

builder.add_node("validate_input",         validate_input)
builder.add_node("evaluate_compatibility", evaluate_compatibility)
builder.add_node("output_presentation",    output_presentation)

builder.add_edge(START,                    "validate_input")
builder.add_edge("validate_input",         "evaluate_compatibility")
builder.add_edge("evaluate_compatibility", "output_presentation")
builder.add_edge("output_presentation",    END)

graph = builder.compile()

def run_check(cpu_brand: str, cpu_model: str, motherboard: str, graphics_card: str, config: Any = None) -> dict:
    """
    Validate the four fields, then run the workflow.
    Raises ValidationError before any evaluator is touched.
    """
    descriptor = HardwareDescriptor(
        cpu_brand=cpu_brand or "",
        cpu_model=cpu_model or "",
        motherboard=motherboard or "",
        graphics_card=graphics_card or "",
    )
    validate_descriptor(descriptor)
    initial = AgentStateInput(
        cpu_brand=descriptor.cpu_brand,
        cpu_model=descriptor.cpu_model,
        motherboard=descriptor.motherboard,
        graphics_card=descriptor.graphics_card,
    )
    return graph.invoke(initial, config=config)

def check_compatibility(cpu_brand: str, cpu_model: str, motherboard: str, graphics_card: str, config: Any = None) -> Verdict:
    return run_check(cpu_brand, cpu_model, motherboard, graphics_card, config=config)["verdict"]

# -------------------------------------------------------
# CLI entrypoint
# -------------------------------------------------------
if __name__ == "__main__":
    result = run_check(
        cpu_brand="Intel",
        cpu_model="Core i7-9700K",
        motherboard="Gigabyte Z390 Aorus Pro",
        graphics_card="AMD Radeon RX 580",
    )
    print(result["final_results"])
