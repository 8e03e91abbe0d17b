"""API views for the booking domain."""

from __future__ import annotations

from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.permissions import IsSessionAuthenticated

from . import services
from .serializers import BookingSerializer, BookingWithPlaceSerializer


class BookingCollectionView(APIView):
    """``POST`` books a place for the caller, ``GET`` lists the caller's bookings."""

    permission_classes = [IsSessionAuthenticated]

    def get(self, request):  # type: ignore
        bookings = services.list_user_bookings(request.auth)
        return Response(BookingWithPlaceSerializer(bookings, many=True).data)

    def post(self, request):  # type: ignore
        booking = services.create_booking(request.auth, request.data)
        return Response(BookingSerializer(booking).data)


class BookingDetailView(APIView):
    permission_classes = [IsSessionAuthenticated]

    def delete(self, request, pk):  # type: ignore
        services.cancel_booking(request.auth, pk)
        return Response({"success": True})
