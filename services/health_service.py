from dataclasses import dataclass

DISCLAIMER = (
    "These suggestions are for informational purposes only and do not constitute "
    "professional medical advice. Always consult with a healthcare provider before "
    "starting any new fitness or diet program."
)


@dataclass(frozen=True)
class BmiAdvice:
    category: str
    suggestion: str


UNDERWEIGHT = BmiAdvice(
    "Underweight",
    "Focus on strength training to build healthy muscle mass. Consider consulting a "
    "nutritionist to ensure you're getting enough calories and nutrients.",
)
NORMAL = BmiAdvice(
    "Normal Weight",
    "Great job! Maintain your health with a balanced routine of cardiovascular exercise "
    "(like running or cycling) and strength training.",
)
OVERWEIGHT = BmiAdvice(
    "Overweight",
    "A combination of consistent cardiovascular exercise and resistance training is "
    "recommended. Seeking professional dietary advice can also be very beneficial.",
)
OBESE = BmiAdvice(
    "Obese",
    "It's recommended to combine consistent cardiovascular exercise with resistance "
    "training. Please consider seeking professional dietary advice for a personalized plan.",
)


def compute_bmi(height_m: float, weight_kg: float) -> float:
    """
    Body Mass Index = weight / height^2.
    Rounded to nine decimals to drop float noise (1.8 m / 81 kg is 25.0,
    not 24.999999999999996); round to two only for display.
    Returns 0 when either value is unset (<= 0), meaning "not computable".
    """
    if height_m > 0 and weight_kg > 0:
        return round(weight_kg / (height_m ** 2), 9)
    return 0.0


def classify_bmi(bmi: float) -> BmiAdvice:
    if bmi < 18.5:
        return UNDERWEIGHT
    if bmi < 25:
        return NORMAL
    if bmi < 30:
        return OVERWEIGHT
    return OBESE


def bmi_feedback(bmi: float) -> str:
    """
    Builds the text block shown to a trainee after entering height and weight.
    """
    advice = classify_bmi(bmi)
    lines = [
        "--- General Fitness Feedback ---",
        f"Category: {advice.category}",
        f"Suggestion: {advice.suggestion}",
        "",
        "** DISCLAIMER **",
        DISCLAIMER,
    ]
    return "\n".join(lines)
