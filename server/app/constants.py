"""
Display labels shared by the web page, the JSON API and the tests.

Each computed value is rendered into its own output region as
"<label>: <value>".
"""

PRIME_FACTORS_LABEL = "Prime Factorization"
LCM_LABEL = "LCM"
FACTORIAL_LABEL = "Factorial"
FACTORIAL_APPROX_LABEL = "Factorial (Approx)"
DIGIT_SUM_LABEL = "Sum of Digits"
PERFECT_SQUARE_LABEL = "Is Perfect Square"

SHOW_EXACT_FACTORIAL_LABEL = "Show Exact Factorial"
EXACT_FACTORIAL_LABEL = "Exact"

INVALID_INPUT_MESSAGE = "Please enter a valid positive integer."
