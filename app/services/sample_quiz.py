"""Fixed content of the shared sample quiz.

The sample quiz is owned by the system user and playable without signing in.
"""
from typing import List

from app.models import Option, QuestionDraft, SYSTEM_OWNER

SAMPLE_QUIZ_OWNER = SYSTEM_OWNER
SAMPLE_QUIZ_TOPIC = "JavaScript Basics - Sample Quiz"


def _question(text, options, correct_option_id) -> QuestionDraft:
    return QuestionDraft(
        text=text,
        options=[Option(id=i, text=option) for i, option in enumerate(options, start=1)],
        correct_option_id=correct_option_id,
    )


SAMPLE_QUESTIONS: List[QuestionDraft] = [
    _question("What is the type of NaN in JavaScript?",
              ["String", "Number", "Undefined", "Object"], 2),
    _question("How do you create a promise in JavaScript?",
              ["new Promise()", "Promise.create()", "createPromise()", "Promise.new()"], 1),
    _question("Which method mutates the original array?",
              ["map()", "filter()", "push()", "concat()"], 3),
    _question('What does "this" keyword refer to in arrow functions?',
              ["The global object", "The parent scope", "The function itself", "undefined"], 2),
    _question("Which is the correct way to declare a constant in JavaScript?",
              ["constant x = 10;", "const x = 10;", "let x = 10;", "var x = 10;"], 2),
    _question("What is the output of: typeof []?",
              ["array", "object", "Array", "undefined"], 2),
    _question("Which method is used to parse a string to an integer?",
              ["Integer.parse()", "parseInt()", "toInteger()", "Number.parse()"], 2),
    _question("What does JSON stand for?",
              ["JavaScript Object Notation", "Java Source Object Notation",
               "JavaScript Online Notation", "Java Serialized Object Notation"], 1),
    _question("Which operator is used for strict equality comparison?",
              ["==", "===", "=", "!="], 2),
    _question('What is the result of: 2 + "2"?',
              ["4", "22", "NaN", "Error"], 2),
]
