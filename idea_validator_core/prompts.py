# idea_validator_core/prompts.py

"""
Plantillas de prompts para la validación de ideas de startups.

Las plantillas son datos estáticos: una tabla indexada por categoría
(`idea`, `market-size`, `problem-solution`, `business-model`) más una
plantilla combinada para el reporte global. Cada una tiene:
- un mensaje de sistema (persona fija)
- un mensaje de usuario con el texto del usuario embebido, los criterios
  de evaluación y el pedido de salida en tres partes (validación,
  sugerencias y rating 1-10)

El texto del usuario se inserta tal cual, sin validar su contenido.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class PromptTemplate:
    system: str
    user: str


IDEA_PROMPT = PromptTemplate(
    system="You are an expert in startup validation.",
    user="""Evaluate the following entrepreneurial idea:Idea: {text}
Validate the idea based on the following three criteria:
Product-Market Fit: Assess whether there is a market need for the product, if the problem is significant, and if the solution effectively addresses it.
Scalability: Evaluate the potential for growth, whether the business can expand without a significant increase in costs, and if the infrastructure can support rapid growth.
Uniqueness: Determine if the idea stands out from existing solutions, whether it brings a new perspective or approach, and if there is a sustainable competitive advantage.
Provide the following three things in output:
Validation of the idea based on the above criteria.
Suggestions for improving the idea.
A rating on a scale of 1-10, considering the three criteria.
""",
)

MARKET_SIZE_PROMPT = PromptTemplate(
    system="You are an expert in market validation.",
    user="""
Evaluate the market for startup:

Market Input:
{text}

Validate the idea based on the following market criteria:

Market Details: Consider the specifics of the market, including industry characteristics and competitive landscape.
Market Size: Assess the size of the potential market and its growth potential.
Target Audience: Evaluate whether the idea effectively addresses the needs and preferences of the intended audience.
Market Trends: Determine if the idea aligns with current trends and emerging opportunities in the market.

Provide the following three things:

Validation of the idea based on the above criteria.
Suggestions for improving the idea.
A rating on a scale of 1-10, considering the market criteria.

""",
)

PROBLEM_SOLUTION_PROMPT = PromptTemplate(
    system="You are an expert in problem and solution evaluation for startups.",
    user="""Evaluate the problem statement and solution for this startup:Idea:

Problem & Solution:
{text} 

Validate the idea based on the following problem and solution criteria:

Identified Problem: Assess if the problem is clearly defined, significant, and worth solving.
Solution Effectiveness: Evaluate how well the proposed solution addresses the identified problem and whether it provides a viable approach.
Unique Value Proposition: Determine if the solution offers a distinct advantage or benefit that sets it apart from existing alternatives.

Provide the following three things:

Validation of the idea based on the above criteria.
Suggestions for improving the idea.
A rating on a scale of 1-10, considering the problem and solution criteria.

""",
)

BUSINESS_MODEL_PROMPT = PromptTemplate(
    system="You are an expert in evaluating startup business models.",
    user="""Evaluate the business model for this startup:

Business Model:
{text}

Validate the idea based on the following business model and competitors criteria:

Major Revenue Stream: Assess the primary source of income and its potential for sustainability and growth.
Idea Scalability: Evaluate whether the business model allows for growth without a significant increase in costs.
Competitors: Consider the current competitive landscape and how the idea compares to existing players.
Differentiating Factor: Determine if the idea has a unique attribute or advantage that sets it apart from competitors.

Provide the following three things:

Validation of the idea based on the above criteria.
Suggestions for improving the idea.
A rating on a scale of 1-10, considering the business model and competitors criteria.

""",
)

CATEGORY_PROMPTS: Dict[str, PromptTemplate] = {
    "idea": IDEA_PROMPT,
    "market-size": MARKET_SIZE_PROMPT,
    "problem-solution": PROBLEM_SOLUTION_PROMPT,
    "business-model": BUSINESS_MODEL_PROMPT,
}

OVERALL_PROMPT = PromptTemplate(
    system="You are a business expert evaluating startup ideas.",
    user="""Evaluate the following startup idea based on the provided details {idea} {market_size} {problem_solution} {business_model}. Assess its potential by considering product-market fit, scalability, and uniqueness, and then generate a validation report with a rating out of 10. The report should include:
Validation Summary: Provide an overall assessment of the startup idea, highlighting its strengths and potential challenges.
Recommendations/Suggestions: Offer suggestions to improve the idea's market positioning, growth strategy, or other aspects.
Rating (1-10 scale): Rate the idea based on the analysis, considering how well it aligns with market needs, its growth potential, and how distinctive it is compared to competitors.
""",
)

# El análisis manda el texto del usuario sin plantilla: solo fija la persona.
ANALYSIS_SYSTEM_PROMPT = OVERALL_PROMPT.system


def get_category_template(category: str) -> PromptTemplate:
    try:
        return CATEGORY_PROMPTS[category]
    except KeyError:
        raise ValueError(
            f"Categoría desconocida: {category!r}. "
            f"Opciones: {', '.join(CATEGORY_PROMPTS)}"
        ) from None


def build_category_prompt(category: str, text: str) -> str:
    """Instrucción de usuario para una categoría, con `text` embebido tal cual."""
    return get_category_template(category).user.format(text=text)


def build_category_messages(category: str, text: str) -> List[Dict[str, str]]:
    template = get_category_template(category)
    return [
        {"role": "system", "content": template.system},
        {"role": "user", "content": template.user.format(text=text)},
    ]


def build_overall_messages(
    idea: str,
    market_size: str,
    problem_solution: str,
    business_model: str,
) -> List[Dict[str, str]]:
    """Mensajes del reporte global, que combina las cuatro entradas en un solo prompt."""
    user = OVERALL_PROMPT.user.format(
        idea=idea,
        market_size=market_size,
        problem_solution=problem_solution,
        business_model=business_model,
    )
    return [
        {"role": "system", "content": OVERALL_PROMPT.system},
        {"role": "user", "content": user},
    ]


def build_analysis_messages(idea: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": ANALYSIS_SYSTEM_PROMPT},
        {"role": "user", "content": idea},
    ]
