# services/question_bank.py
import json
import logging
import os
from copy import deepcopy

from config import Config
from models.question import questions_from_document, questions_to_document
from questions.main_questions import QUESTIONS

logger = logging.getLogger(__name__)


class QuestionBank:
    """
    Loads the assessment questions from a JSON file.
    Falls back to the built-in set when the file is missing, unreadable
    or empty, and tries to write that set back so it can be customized.
    """

    def __init__(self, file_path=None, notify=None):
        self.file_path = file_path or Config.QUESTIONS_FILE_PATH
        # presentation hook for user-facing notices
        self.notify = notify

    def get_default_questions(self):
        return questions_from_document(deepcopy(QUESTIONS))

    def load(self):
        """Return the question list. Never raises."""
        if os.path.exists(self.file_path):
            try:
                with open(self.file_path, 'r', encoding='utf-8') as f:
                    document = json.load(f)
                questions = questions_from_document(document)
                if questions:
                    logger.info(f"Loaded {len(questions)} questions from {self.file_path}")
                    return questions
                logger.warning(f"{self.file_path} contains no questions. Using defaults.")
            except Exception as e:
                # bad JSON, wrong shapes, unreadable file or nesting too deep for the decoder
                logger.warning(f"Error loading {self.file_path}: {e}")
                self._notify(f"[!] Error loading JSON: {e}. Using defaults.")

        defaults = self.get_default_questions()
        try:
            self.save(defaults)
        except OSError as e:
            logger.debug(f"Could not write default questions to {self.file_path}: {e}")

        return defaults

    def save(self, questions):
        with open(self.file_path, 'w', encoding='utf-8') as f:
            json.dump(questions_to_document(questions), f, indent=4, ensure_ascii=False)

    def _notify(self, message):
        if self.notify:
            self.notify(message)
