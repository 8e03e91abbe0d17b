"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.places.models import Place
from apps.users.models import User
from apps.users.sessions import issue_token


class BookingAPITests(APITestCase):
    """Covers creation, listing with the place embedded and cancellation."""

    def setUp(self) -> None:
        self.alice = User.objects.create_user(email="alice@example.com", password="Secret123", name="Alice")
        self.bob = User.objects.create_user(email="bob@example.com", password="Secret123", name="Bob")
        self.place = Place.objects.create(
            owner=self.bob,
            title="Mountain Cabin",
            address="Ridge Rd 5",
            max_guests=4,
            price=Decimal("80.00"),
        )
        self.list_url = reverse("bookings:collection")

    def login(self, user: User) -> None:
        self.client.cookies[settings.AUTH_COOKIE_NAME] = issue_token(user)

    def payload(self, **overrides):
        data = {
            "place": self.place.pk,
            "checkIn": "2030-01-10",
            "checkOut": "2030-01-13",
            "numberOfGuests": 2,
            "name": "Alice",
            "phone": "+1 555 0100",
            "price": 240,
        }
        data.update(overrides)
        return data

    def test_requires_session(self) -> None:
        response = self.client.post(self.list_url, self.payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(Booking.objects.exists())

    def test_guest_can_create_booking(self) -> None:
        self.login(self.alice)
        response = self.client.post(self.list_url, self.payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["place"], self.place.pk)
        self.assertEqual(response.data["user"], self.alice.pk)
        self.assertEqual(response.data["checkIn"], "2030-01-10")
        self.assertEqual(response.data["numberOfGuests"], 2)

        booking = Booking.objects.get()
        self.assertEqual(booking.check_in, date(2030, 1, 10))
        self.assertEqual(booking.price, Decimal("240.00"))

    def test_client_price_is_stored_as_sent(self) -> None:
        self.login(self.alice)
        self.client.post(self.list_url, self.payload(price="1.5"), format="json")
        self.assertEqual(Booking.objects.get().price, Decimal("1.50"))

    def test_guests_default_to_one(self) -> None:
        self.login(self.alice)
        data = self.payload()
        del data["numberOfGuests"]
        response = self.client.post(self.list_url, data, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["numberOfGuests"], 1)

    def test_long_contact_details_are_accepted(self) -> None:
        self.login(self.alice)
        name = "Alice " * 60
        phone = "+1 555 0100 ext. 42, ask for the front desk " * 3
        response = self.client.post(self.list_url, self.payload(name=name, phone=phone), format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(Booking.objects.get().phone, phone.strip())
        for field in ("name", "phone"):
            self.assertIsNone(Booking._meta.get_field(field).max_length)

    def test_missing_fields(self) -> None:
        self.login(self.alice)
        for field in ("place", "checkIn", "checkOut", "name", "phone"):
            with self.subTest(field=field):
                response = self.client.post(self.list_url, self.payload(**{field: ""}), format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"], "missing_fields")
        self.assertFalse(Booking.objects.exists())

    def test_missing_fields_reported_before_price(self) -> None:
        self.login(self.alice)
        response = self.client.post(self.list_url, self.payload(name="", price=-1), format="json")
        self.assertEqual(response.data["error"], "missing_fields")

    def test_invalid_price(self) -> None:
        self.login(self.alice)
        for price in (-10, "abc"):
            with self.subTest(price=price):
                response = self.client.post(self.list_url, self.payload(price=price), format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"], "invalid_price")

    def test_unknown_place(self) -> None:
        self.login(self.alice)
        response = self.client.post(self.list_url, self.payload(place=99999), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "invalid_place")

    def test_invalid_date(self) -> None:
        self.login(self.alice)
        response = self.client.post(self.list_url, self.payload(checkIn="next week"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "invalid_date")

    def test_list_embeds_place(self) -> None:
        Booking.objects.create(
            place=self.place,
            user=self.alice,
            check_in=date(2030, 2, 1),
            check_out=date(2030, 2, 3),
            name="Alice",
            phone="1",
        )
        Booking.objects.create(
            place=self.place,
            user=self.bob,
            check_in=date(2030, 3, 1),
            check_out=date(2030, 3, 3),
            name="Bob",
            phone="2",
        )
        self.login(self.alice)
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["place"]["title"], "Mountain Cabin")
        self.assertEqual(response.data[0]["place"]["price"], Decimal("80.00"))

    def test_cancel_twice(self) -> None:
        self.login(self.alice)
        booking_id = self.client.post(self.list_url, self.payload(), format="json").data["id"]
        url = reverse("bookings:detail", args=[booking_id])

        first = self.client.delete(url)
        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(first.data, {"success": True})

        second = self.client.delete(url)
        self.assertEqual(second.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(second.data["error"], "not_found")

    def test_only_creator_can_cancel(self) -> None:
        self.login(self.alice)
        booking_id = self.client.post(self.list_url, self.payload(), format="json").data["id"]

        self.login(self.bob)
        response = self.client.delete(reverse("bookings:detail", args=[booking_id]))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "forbidden")
        self.assertTrue(Booking.objects.filter(pk=booking_id).exists())


class BookingScenarioTests(APITestCase):
    """Register, log in, list a place, book it, then try to cancel as someone else."""

    def sign_up_and_log_in(self, name: str, email: str) -> None:
        self.client.cookies.clear()
        credentials = {"email": email, "password": "Secret123"}
        self.client.post(reverse("users:register"), dict(credentials, name=name), format="json")
        response = self.client.post(reverse("users:login"), credentials, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_other_user_cannot_cancel(self) -> None:
        self.sign_up_and_log_in("Alice", "alice@example.com")
        place = self.client.post(
            reverse("places:collection"),
            {"title": "Beach House", "address": "1 Ocean Drive", "price": 100},
            format="json",
        ).data
        booking = self.client.post(
            reverse("bookings:collection"),
            {
                "place": place["id"],
                "checkIn": "2030-07-01",
                "checkOut": "2030-07-04",
                "name": "Alice",
                "phone": "555-0100",
                "price": 300,
            },
            format="json",
        ).data

        self.sign_up_and_log_in("Bob", "bob@example.com")
        response = self.client.delete(reverse("bookings:detail", args=[booking["id"]]))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Booking.objects.filter(pk=booking["id"]).exists())
