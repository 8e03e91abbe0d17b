"""API views for reviews. All routes are public."""

from __future__ import annotations

from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import services
from .serializers import ReviewCreateSerializer, ReviewSerializer


class ReviewCollectionView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        review = services.create_review(data["placeId"], data["rating"], data["text"])
        return Response(ReviewSerializer(review).data)


class ReviewDetailView(APIView):
    """``GET`` takes a place id, ``DELETE`` takes a review id."""

    permission_classes = [AllowAny]

    def get(self, request, pk):  # type: ignore
        reviews = services.list_place_reviews(pk)
        return Response(ReviewSerializer(reviews, many=True).data)

    def delete(self, request, pk):  # type: ignore
        services.delete_review(pk)
        return Response({"success": True})
