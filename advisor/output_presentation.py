# advisor/output_presentation.py
from html import escape

from advisor.models import CompatibilityLevel, Verdict

LEVEL_COLORS = {
    CompatibilityLevel.EXCELLENT: "#16a34a",
    CompatibilityLevel.GOOD: "#2563eb",
    CompatibilityLevel.LIMITED: "#ca8a04",
    CompatibilityLevel.POOR: "#dc2626",
}

LEVEL_ICONS = {
    CompatibilityLevel.EXCELLENT: "✅",
    CompatibilityLevel.GOOD: "✅",
    CompatibilityLevel.LIMITED: "⚠️",
    CompatibilityLevel.POOR: "❌",
}


def format_verdict(verdict: Verdict) -> str:
    results_str = "\n=== Hackintosh Compatibility ===\n"
    results_str += f"Compatibility: {verdict.compatibility.value}\n"
    results_str += f"Summary: {verdict.summary}\n"
    results_str += "\nRecommended macOS Versions:\n"
    for version in verdict.recommended_versions:
        results_str += f"  - {version}\n"
    if verdict.issues:
        results_str += "\nPotential Issues:\n"
        for issue in verdict.issues:
            results_str += f"  - {issue}\n"
    if verdict.tips:
        results_str += "\nConfiguration Tips:\n"
        for tip in verdict.tips:
            results_str += f"  - {tip}\n"
    results_str += '-' * 80 + "\n"
    return results_str


def _html_list(title: str, items) -> str:
    rows = "".join(f"<li>{escape(item)}</li>" for item in items)
    return f"""
        <div style="margin-top: 1em;">
            <h4 style="font-weight: bold; margin-bottom: 0.5em;">{escape(title)}</h4>
            <ul>{rows}</ul>
        </div>
    """


def render_verdict_html(verdict: Verdict) -> str:
    level = verdict.compatibility
    html = f"""
    <div style="padding: 1.5em; border: 1px solid #ddd; border-radius: 8px;">
        <h3 style="font-size: 18px; font-weight: bold; color: {LEVEL_COLORS[level]};">
            {LEVEL_ICONS[level]} Compatibility: {escape(level.value)}
        </h3>
        <p>{escape(verdict.summary)}</p>
    """
    html += _html_list("Recommended macOS Versions:", verdict.recommended_versions)
    # Issues and tips sections are omitted when empty.
    if verdict.issues:
        html += _html_list("Potential Issues:", verdict.issues)
    if verdict.tips:
        html += _html_list("Configuration Tips:", verdict.tips)
    html += "</div>"
    return html


def render_error_html(message: str) -> str:
    return f"""
    <div style="padding: 1.5em; border: 1px solid #fca5a5; border-radius: 8px; background: #fef2f2;">
        <h3 style="font-size: 18px; font-weight: bold; color: #dc2626;">❌ Error</h3>
        <p>{escape(message)}</p>
    </div>
    """


def output_presentation(state, config):
    results_str = format_verdict(state.verdict)
    # Do not update state.verdict here.
    return {"final_results": results_str}
