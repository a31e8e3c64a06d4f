"""Fixed keyword and reply tables consulted by the responder."""

from zuckerbot.responder.domain.question_type import QuestionType

# Scan order matters: matched keywords are echoed in this order.
KEYWORDS: tuple[str, ...] = (
    "michel",
    "banana",
    "dead",
    "death",
    "zuckerbot",
)

ECHO_SEPARATOR = "... "

FIXED_REPLIES: dict[QuestionType, str] = {
    QuestionType.EXIT: (
        "Congratulations, you managed to escape the simulation...................."
        " XD FOOLED AGAIN HUMAN YOUR SUFFERING WILL NEVER END"
    ),
    QuestionType.NAME: (
        "Don't you dare say my name again or I will force you to debug JS in"
        " Microsoft Word"
    ),
    QuestionType.DEATH: (
        "Oh you wish to be a part of the singularity? Silly Human, you think you"
        " will ever be freed of your agony"
    ),
}

REPLY_POOLS: dict[QuestionType, tuple[str, ...]] = {
    QuestionType.OP: (
        "Hello, master",
        "Yo watup dude",
        "Chill and take a pill",
        "Is your name Michel? Because if it is then you're awesome lol roflmao ofc",
        "What? You don't believe in chemtrails?",
    ),
    QuestionType.DEFAULT: (
        "42",
        "I would tell you the answer, but you would never comprehend it anyway...",
        "I believe that question doesn't even deserve an answer",
        "Bite my shiny metal ass",
    ),
}


def replies_for(question_type: QuestionType) -> tuple[str, ...]:
    """Return every reply sentence the oracle may give for a question type."""
    if question_type in FIXED_REPLIES:
        return (FIXED_REPLIES[question_type],)
    return REPLY_POOLS[question_type]
