"""API tests for anonymous reviews."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.reviews.models import Review


class ReviewAPITests(APITestCase):
    def setUp(self) -> None:
        self.create_url = reverse("reviews:collection")

    def test_create_without_session(self) -> None:
        response = self.client.post(
            self.create_url, {"placeId": "p1", "rating": 5, "text": "Great stay"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["placeId"], "p1")
        self.assertEqual(response.data["rating"], 5)
        self.assertIn("date", response.data)

    def test_newest_first(self) -> None:
        now = timezone.now()
        Review.objects.create(place_id="p1", rating=3, text="Okay", date=now - timedelta(days=2))
        Review.objects.create(place_id="p1", rating=4, text="Good", date=now - timedelta(days=1))
        Review.objects.create(place_id="p2", rating=1, text="Other place")
        self.client.post(self.create_url, {"placeId": "p1", "rating": 5, "text": "Great stay"}, format="json")

        response = self.client.get(reverse("reviews:detail", args=["p1"]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([r["text"] for r in response.data], ["Great stay", "Good", "Okay"])

    def test_rating_out_of_range(self) -> None:
        for rating in (0, 6):
            with self.subTest(rating=rating):
                response = self.client.post(
                    self.create_url, {"placeId": "p1", "rating": rating}, format="json"
                )
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"], "invalid_rating")
        self.assertFalse(Review.objects.exists())

    def test_missing_place_id(self) -> None:
        response = self.client.post(self.create_url, {"rating": 4}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "missing_fields")

    def test_text_is_optional(self) -> None:
        response = self.client.post(self.create_url, {"placeId": "p1", "rating": 4}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["text"], "")

    def test_anyone_can_delete(self) -> None:
        review = Review.objects.create(place_id="p1", rating=2)
        response = self.client.delete(reverse("reviews:detail", args=[review.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"success": True})
        self.assertFalse(Review.objects.exists())

    def test_delete_unknown_id_still_succeeds(self) -> None:
        for review_id in ("12345", "not-an-id"):
            with self.subTest(review_id=review_id):
                response = self.client.delete(reverse("reviews:detail", args=[review_id]))
                self.assertEqual(response.status_code, status.HTTP_200_OK)
                self.assertEqual(response.data, {"success": True})
