# routes/assessment.py
from flask import Blueprint, Response, current_app, jsonify, request, session

from models.career import CareerRegistry
from questions.careers import CAREERS
from services.assessment_service import AssessmentService
from services.question_bank import QuestionBank
from services.report_service import ReportService

assessment_bp = Blueprint('assessment_bp', __name__)
report_service = ReportService()

SESSION_KEYS = ['user_name', 'answers', 'tie_breaker_answer']


def _ensure_session_keys():
    if 'answers' not in session:
        session['answers'] = []
    if 'tie_breaker_answer' not in session:
        session['tie_breaker_answer'] = None
    session.modified = True


def _build_service():
    # fresh registry per request: scores never leak between users
    registry = CareerRegistry.from_catalog(CAREERS)
    bank = QuestionBank(current_app.config.get('QUESTIONS_FILE_PATH'))
    return AssessmentService(registry, question_bank=bank)


def _option_key(index):
    return chr(ord('A') + index)


def _option_for(question, key):
    """Resolve an option letter ('A', 'B', ...) to the question's option."""
    if not isinstance(key, str) or len(key) != 1:
        raise ValueError(f"Invalid answer: {key!r}")
    index = ord(key.upper()) - ord('A')
    if not 0 <= index < len(question.options):
        raise ValueError(f"Invalid answer '{key}' for question '{question.text}'")
    return question.options[index]


def prepare_question_for_client(question, number, tie_breaker=False):
    """Question text and option texts keyed by letter; impacts stay server-side."""
    return {
        'number': number,
        'text': question.text,
        'options': {
            _option_key(i): {'text': option.text}
            for i, option in enumerate(question.options)
        },
        'tie_breaker': tie_breaker
    }


def _replay():
    """
    Rebuild the assessment from the answers stored in the Flask session.
    Returns (service, assessment_session).
    """
    service = _build_service()
    assessment = service.begin(session.get('user_name'))

    for key in session.get('answers', []):
        question = service.current_question(assessment)
        if question is None:
            raise ValueError("Stored answers do not match the question set; please restart")
        service.answer(assessment, _option_for(question, key))

    tie_key = session.get('tie_breaker_answer')
    if tie_key:
        tie_question = service.tie_breaker_question(assessment)
        if tie_question is not None:
            service.answer_tie_breaker(assessment, _option_for(tie_question, tie_key))

    return service, assessment


def _pending_question(service, assessment):
    """(number, question, is_tie_breaker) still waiting for an answer, or None."""
    question = service.current_question(assessment)
    if question is not None:
        return assessment.position + 1, question, False

    tie_question = service.tie_breaker_question(assessment)
    if tie_question is not None:
        return assessment.total_questions + 1, tie_question, True
    return None


def _client_payload(pending):
    if pending is None:
        return None
    number, question, is_tie = pending
    return prepare_question_for_client(question, number, tie_breaker=is_tie)


@assessment_bp.route('/start', methods=['POST'])
def start_assessment():
    """
    Initialize assessment session
    Optional payload: { name: str }
    """
    try:
        data = request.get_json(silent=True) or {}
        for key in SESSION_KEYS:
            session.pop(key, None)
        name = (data.get('name') or '').strip()
        if name:
            session['user_name'] = name
        _ensure_session_keys()

        service, assessment = _replay()
        return jsonify({
            "success": True,
            "message": "Assessment started",
            "user_name": assessment.user_name,
            "total_questions": assessment.total_questions,
            "next_question": _client_payload(_pending_question(service, assessment))
        })
    except Exception as e:
        return jsonify({"error": str(e)}), 400


@assessment_bp.route('/questions', methods=['GET'])
def get_questions():
    try:
        questions = _build_service().question_bank.load()
        client_questions = [
            prepare_question_for_client(q, number)
            for number, q in enumerate(questions, start=1)
        ]
        return jsonify({"success": True, "questions": client_questions})
    except Exception as e:
        return jsonify({"error": str(e)}), 400


@assessment_bp.route('/submit-answer', methods=['POST'])
def submit_answer():
    """
    Expected payload:
    {
      question_number: int,
      answer: 'A', 'B', ...
    }
    Returns: next_question (or null), current scores, current_phase
    """
    try:
        _ensure_session_keys()
        data = request.get_json(silent=True) or {}
        qnum = data.get('question_number')
        answer = data.get('answer')

        if qnum is None or answer is None:
            return jsonify({"error": "Missing question_number or answer"}), 400

        service, assessment = _replay()
        pending = _pending_question(service, assessment)
        if pending is None:
            return jsonify({"error": "Assessment already complete"}), 400

        number, question, is_tie = pending
        if int(qnum) != number:
            return jsonify({"error": f"Expected an answer for question {number}"}), 400

        option = _option_for(question, answer)
        if is_tie:
            service.answer_tie_breaker(assessment, option)
            session['tie_breaker_answer'] = answer
        else:
            service.answer(assessment, option)
            session['answers'] = session.get('answers', []) + [answer]
        session.modified = True

        next_pending = _pending_question(service, assessment)
        if next_pending is None:
            current_phase = "complete"
        elif next_pending[2]:
            current_phase = "tie_breaker"
        else:
            current_phase = "main"

        return jsonify({
            "success": True,
            "next_question": _client_payload(next_pending),
            "scores": {career.name: career.score for career in assessment.registry},
            "badges": list(assessment.earned_badges),
            "current_phase": current_phase
        })
    except Exception as e:
        return jsonify({"error": str(e)}), 400


def _completed_result():
    service, assessment = _replay()
    if _pending_question(service, assessment) is not None:
        raise ValueError("Assessment is not complete")
    return service.finalize(assessment)


@assessment_bp.route('/results', methods=['GET'])
def get_results():
    try:
        result = _completed_result()
        return jsonify({"success": True, **result.to_dict()})
    except Exception as e:
        return jsonify({"error": str(e)}), 400


@assessment_bp.route('/report', methods=['GET'])
def get_report():
    try:
        result = _completed_result()
        return Response(report_service.generate_report(result), mimetype='text/plain')
    except Exception as e:
        return jsonify({"error": str(e)}), 400
