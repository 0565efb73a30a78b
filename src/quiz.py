"""Cybersecurity multiple-choice quiz.

Questions are asked in catalogue order. Each answer is judged on its first
character (case-insensitive) against the correct option letter; a blank or
unreadable answer skips the question without penalty.
"""
from typing import Optional, Sequence, Tuple
from models import QuizQuestion
from presenter import SPEAKER, Presenter

QUESTIONS: Tuple[QuizQuestion, ...] = (
    QuizQuestion(
        question="What should you do if you receive an email asking for your password?",
        options=("Reply with your password", "Delete the email", "Report the email as phishing", "Ignore it"),
        correct_option_index=2,
        explanation="Reporting phishing emails helps prevent scams and protects others.",
    ),
    QuizQuestion(
        question="True or False: Using the same password for every account is safe.",
        options=("True", "False"),
        correct_option_index=1,
        explanation="False! Reusing passwords increases risk if one account is breached.",
    ),
    QuizQuestion(
        question="Which is a strong password example?",
        options=("123456", "Password!", "Winter2025$", "qwerty"),
        correct_option_index=2,
        explanation="\"Winter2025$\" includes uppercase, numbers, and a special character — good job!",
    ),
    QuizQuestion(
        question="What does 2FA stand for?",
        options=("Two-Factor Authentication", "Two-Firewall Access", "Two-Factor Access", "Twice-Filtered Authentication"),
        correct_option_index=0,
        explanation="2FA adds an extra layer of security — always enable it when possible.",
    ),
    QuizQuestion(
        question="Which site is safer to enter personal information?",
        options=("http://example.com", "https://example.com"),
        correct_option_index=1,
        explanation="HTTPS encrypts your data, making it safer from interception.",
    ),
)

PERFECT_MESSAGE = "💪 Great job! You're a cybersecurity pro!"
GOOD_MESSAGE = "👍 Nice! You’re on the right track. Keep learning to stay safe."
PRACTICE_MESSAGE = "🔒 Keep practicing — knowledge is your best defense!"
GOOD_THRESHOLD = 3


def score_band(score: int, total: int) -> str:
    """Summary message for a final score."""
    if score == total:
        return PERFECT_MESSAGE
    if score >= GOOD_THRESHOLD:
        return GOOD_MESSAGE
    return PRACTICE_MESSAGE


class QuizEngine:
    def __init__(self, presenter: Presenter, questions: Sequence[QuizQuestion] = QUESTIONS):
        self.presenter = presenter
        self.questions: Tuple[QuizQuestion, ...] = tuple(questions)

    def run(self) -> int:
        """Ask every question, print the summary band and return the score."""
        p = self.presenter
        score = 0
        p.show_divider("Cybersecurity Quiz Time!")
        p.write_typed(SPEAKER + "Let's begin! Answer each question by typing the letter of your choice.")
        for number, question in enumerate(self.questions, start=1):
            result = self._ask(number, question)
            if result:
                score += 1
        p.show_divider("Quiz Complete")
        p.write_typed(f"{SPEAKER}You got {score} out of {len(self.questions)} correct!")
        p.write_typed(SPEAKER + score_band(score, len(self.questions)))
        return score

    def _ask(self, number: int, question: QuizQuestion) -> Optional[bool]:
        """Returns True/False for a judged answer, None when skipped."""
        p = self.presenter
        p.write_line(f"\nQuestion {number}: {question.question}")
        for idx, option in enumerate(question.options):
            p.write_line(f"{chr(ord('A') + idx)}) {option}")
        answer = (p.read_line("Your answer: ") or '').strip().upper()
        if not answer:
            p.write_typed(SPEAKER + "You didn't enter an answer. Let's skip to the next one.")
            return None
        if answer[0] == question.correct_letter:
            p.write_typed(SPEAKER + "Correct! " + question.explanation)
            return True
        p.write_typed(f"{SPEAKER}Oops! That’s not right. {question.explanation}")
        return False
