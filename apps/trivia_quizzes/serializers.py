from rest_framework import serializers
from .models import Quiz
from .game import NextQuestion, CheckResult, GameOver


#
# Catalog CRUD
#
class QuizSerializer(serializers.ModelSerializer):
    question = serializers.CharField(trim_whitespace=True)
    answer = serializers.CharField(max_length=255, trim_whitespace=True)

    class Meta:
        model = Quiz
        fields = ("id", "question", "answer", "created_at", "updated_at")
        read_only_fields = ("id", "created_at", "updated_at")


#
# Question shown to a player (never carries the answer)
#
class QuizPublicSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    question = serializers.CharField()


class PlaySerializer(serializers.Serializer):
    quiz = QuizPublicSerializer()
    answer = serializers.CharField(allow_blank=True)


class CheckSerializer(serializers.Serializer):
    quiz = QuizPublicSerializer()
    answer = serializers.CharField(allow_blank=True)
    result = serializers.BooleanField()


#
# Random-play outcomes
#
class NextQuestionSerializer(serializers.Serializer):
    quiz = QuizPublicSerializer()
    score = serializers.IntegerField()
    total = serializers.IntegerField()


class CheckResultSerializer(serializers.Serializer):
    quiz = QuizPublicSerializer()
    answer = serializers.CharField(source="submitted_answer", allow_blank=True)
    result = serializers.BooleanField(source="correct")
    score = serializers.IntegerField()


class GameOverSerializer(serializers.Serializer):
    score = serializers.IntegerField()
    total = serializers.IntegerField()
    empty_catalog = serializers.BooleanField()


_OUTCOMES = {
    NextQuestion: ("next_question", NextQuestionSerializer),
    CheckResult: ("check_result", CheckResultSerializer),
    GameOver: ("game_over", GameOverSerializer),
}


def serialize_outcome(outcome) -> dict:
    tag, serializer_class = _OUTCOMES[type(outcome)]
    data = {"outcome": tag}
    data.update(serializer_class(outcome).data)
    return data
