# engine/exam/randomizer.py
"""
Randomisation d'examen par utilisateur : ZÉRO accès DB.
Reçoit la banque de questions en paramètre, retourne l'examen transformé.

Pipeline randomize_exam_for_user :
    1. Mélange de TOUTE la banque (seed = user_id + test_id)
    2. Troncature à max_questions
    3. Pour chaque question retenue : mélange des options avec le MÊME
       générateur (la séquence continue, pas de re-seed par question)
       puis renommage des ids en A, B, C, D, …
    4. correct_answer recalculé d'après l'identité de l'option correcte
       d'origine, jamais d'après sa position

Même (questions, user_id, test_id, max_questions) → même examen, octet pour octet.
Sans identité utilisateur → simple_randomize_questions (non déterministe).

Appelé par : modules/assessment/service.py
"""
import random
from typing import List, Optional

from compass.core.logging import get_logger
from compass.engine.exam.seeded_random import SeededRandom
from compass.shared.models import Option, OptionsIn, Question

logger = get_logger(__name__)

FALLBACK_CORRECT_ANSWER = "A"


def option_id_for(index: int) -> str:
    """0 → "A", 1 → "B", … (au-delà de Z : suite de la table ASCII)."""
    return chr(ord("A") + index)


def normalize_options(options: OptionsIn) -> List[Option]:
    """
    Ramène les deux formes acceptées vers une liste ordonnée d'Option.

        [{"option_id": "A", "text": "Paris"}, ...]  → inchangé
        {"A": "Paris", "B": "Rome"}                 → ordre d'insertion du mapping
    """
    if isinstance(options, dict):
        return [Option(option_id=str(k), text=v) for k, v in options.items()]
    return [
        o if isinstance(o, Option) else Option.model_validate(o)
        for o in options
    ]


def _shuffle_question_options(question: Question, rng: SeededRandom) -> Question:
    original = normalize_options(question.options)
    shuffled = rng.shuffle(original)

    new_options: List[Option] = []
    new_correct = None
    for index, option in enumerate(shuffled):
        new_id = option_id_for(index)
        new_options.append(Option(option_id=new_id, text=option.text))
        if option.option_id == question.correct_answer:
            new_correct = new_id

    if new_correct is None:
        logger.warning(
            "Question %s : correct_answer=%r absent des options, repli sur %r",
            question.id, question.correct_answer, FALLBACK_CORRECT_ANSWER,
        )
        new_correct = FALLBACK_CORRECT_ANSWER

    return question.model_copy(
        update={"options": new_options, "correct_answer": new_correct}
    )


def _truncate(questions: List[Question], max_questions: Optional[int]) -> List[Question]:
    if max_questions and max_questions < len(questions):
        return questions[:max_questions]
    return questions


def randomize_exam_for_user(
    questions: List[Question],
    user_id: Optional[str],
    test_id: str,
    max_questions: Optional[int] = None,
) -> List[Question]:
    """
    Examen reproductible et propre à l'utilisateur.

    Args:
        questions     : banque complète du test (ordre source)
        user_id       : identité stable (email), vide/None → repli non déterministe
        test_id       : identifiant du test
        max_questions : plafond optionnel (None ou 0 = toute la banque)

    Returns:
        Liste de Question aux options renommées A, B, C, … ;
        [] si la banque est vide.

    Raises:
        ValueError : banque None (violation de contrat, pas une banque vide)
    """
    if questions is None:
        raise ValueError("Banque de questions manquante.")
    if not questions:
        return []

    if not user_id:
        logger.warning(
            "Aucune identité utilisateur pour le test %s, randomisation non déterministe.",
            test_id,
        )
        return simple_randomize_questions(questions, max_questions)

    rng = SeededRandom.for_user(user_id, test_id)

    shuffled = _truncate(rng.shuffle(questions), max_questions)

    # Même instance rng : la séquence de tirage continue question après question
    return [_shuffle_question_options(q, rng) for q in shuffled]


def simple_randomize_questions(
    questions: List[Question],
    max_questions: Optional[int] = None,
) -> List[Question]:
    """
    Repli sans identité utilisateur : mélange NON reproductible.
    Ne jamais utiliser quand la reprise d'un examen interrompu doit
    retrouver le même ordre. Les options ne sont pas modifiées.
    """
    if questions is None:
        raise ValueError("Banque de questions manquante.")
    if not questions:
        return []

    shuffled = list(questions)
    random.shuffle(shuffled)
    return _truncate(shuffled, max_questions)
