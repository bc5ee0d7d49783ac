"""Questionnaire tests with a scripted prompt."""

from fitquest.questionnaire import Questionnaire, label


class ScriptedPrompt:
    """Stands in for click.prompt, returning pre-converted answers in order."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []

    def __call__(self, question, **kwargs):
        self.questions.append(question)
        return self.answers.pop(0)


def _questionnaire(answers):
    prompt = ScriptedPrompt(answers)
    echoed = []
    return Questionnaire(prompt=prompt, echo=lambda msg="": echoed.append(msg)), prompt, echoed


BASELINE_ANSWERS = [
    30.0, 180.0, 70.0, 3,  # age, weight, height, activity choice
    2.0, 40.0,  # frequency, duration
    2,  # experience choice
    4.0, 5.0, 6.0, 45.0,  # strength, endurance, flexibility, minutes
    3,  # budget choice
    "Y", "n",  # gym, home equipment
    8.0,
]


class TestCollectBaseline:
    def test_answers_mapped(self):
        q, prompt, _ = _questionnaire(BASELINE_ANSWERS)
        baseline = q.collect_baseline()
        assert baseline.activity_level == "moderately_active"
        assert baseline.experience == "intermediate"
        assert baseline.budget == "moderate"
        assert baseline.workout_duration == 40.0
        assert baseline.equipment == ("gym_access",)
        assert baseline.time_available == 45.0
        assert prompt.answers == []

    def test_no_exercise_skips_duration(self):
        answers = BASELINE_ANSWERS[:4] + [0.0] + BASELINE_ANSWERS[6:]
        q, prompt, _ = _questionnaire(answers)
        baseline = q.collect_baseline()
        assert baseline.workout_duration == 0
        assert not any("average workout" in question for question in prompt.questions)

    def test_no_equipment_means_bodyweight(self):
        answers = BASELINE_ANSWERS[:12] + ["", "no"] + BASELINE_ANSWERS[14:]
        q, _, _ = _questionnaire(answers)
        assert q.collect_baseline().equipment == ("bodyweight_only",)

    def test_choices_echoed_as_numbered_list(self):
        q, _, echoed = _questionnaire(BASELINE_ANSWERS)
        q.collect_baseline()
        assert "1. sedentary" in echoed
        assert "5. extremely active" in echoed


class TestCollectGoals:
    def test_weight_goal_asks_target_weight(self):
        q, prompt, _ = _questionnaire([2, 165.0, 8.0, 5.0, 6.0, 9.0, 2])
        goals = q.collect_goals()
        assert goals.primary_goal == "muscle_gain"
        assert goals.target_weight == 165.0
        assert goals.priority == "medium"
        assert any("target weight" in question for question in prompt.questions)

    def test_other_goals_skip_target_weight(self):
        q, prompt, _ = _questionnaire([4, 6.0, 9.0, 6.0, 4.0, 3])
        goals = q.collect_goals()
        assert goals.primary_goal == "endurance"
        assert goals.target_weight is None
        assert goals.target_endurance == 9.0
        assert not any("target weight" in question for question in prompt.questions)


def test_label():
    assert label("general_fitness") == "general fitness"
