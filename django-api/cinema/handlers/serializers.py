"""Serializers for transforming domain models to API responses and back."""

from rest_framework import serializers

from cinema.domain import Movie
from cinema.domain.value_objects import DATE_FORMAT, TIME_FORMAT


class MovieSerializer(serializers.Serializer):
    """Serializer for the Movie domain model, used for input and output."""

    title = serializers.CharField(max_length=255)
    genre = serializers.CharField(max_length=100)
    duration_minutes = serializers.IntegerField(min_value=1)
    classification = serializers.CharField(max_length=50)
    synopsis = serializers.CharField(allow_blank=True)

    def create(self, validated_data: dict) -> Movie:
        return Movie(**validated_data)


class SessionSerializer(serializers.Serializer):
    """Serializer for Session domain model."""

    id = serializers.IntegerField()
    date = serializers.SerializerMethodField()
    time = serializers.SerializerMethodField()
    room_id = serializers.IntegerField(source="room.id")
    movie = MovieSerializer()
    ticket_value = serializers.SerializerMethodField()

    def get_date(self, obj) -> str:
        return obj.date.strftime(DATE_FORMAT)

    def get_time(self, obj) -> str:
        return obj.time.strftime(TIME_FORMAT)

    def get_ticket_value(self, obj) -> str:
        return str(obj.ticket_value)


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.IntegerField()
    total_seats = serializers.IntegerField(source="total_seats.value")
    session_ids = serializers.SerializerMethodField()

    def get_session_ids(self, obj) -> list[int]:
        return [session.id for session in obj.sessions]


class SessionInputSerializer(serializers.Serializer):
    """Validates the shape of add/update payloads.

    Date and time stay strings here; the session service parses them.
    """

    date = serializers.CharField(max_length=10)
    time = serializers.CharField(max_length=5)
    room_id = serializers.IntegerField(min_value=1)
    movie = MovieSerializer()
    ticket_value = serializers.DecimalField(max_digits=10, decimal_places=2)
