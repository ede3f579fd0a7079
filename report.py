"""
Flat text report of a normalization result
"""
from models import NormalizationResult


def format_report(result: NormalizationResult) -> str:
    """
    Render every step and the final relations as plain text, in the same
    layout the results are copied out with
    """
    text = "Normalization Results\n\n"

    for step in result.steps:
        text += f"{step.name}:\n"
        text += f"Relations: {', '.join(str(rel) for rel in step.relations)}\n"

        if step.violating_dependencies:
            text += "Violating Dependencies: "
            text += ", ".join(str(fd) for fd in step.violating_dependencies) + "\n"

        if step.decomposed_relations is not None:
            text += f"Decomposed Relations: {', '.join(str(rel) for rel in step.decomposed_relations)}\n"

        text += f"Reasoning: {step.reasoning}\n\n"

    text += f"Final Relations: {', '.join(str(rel) for rel in result.final_relations)}"
    return text


def save_report(result: NormalizationResult, filename: str) -> str:
    """Write the report to filename and return its text"""
    content = format_report(result)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(content)
    return content
