"""Place API views."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore
from rest_framework.parsers import FormParser, MultiPartParser  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.permissions import IsSessionAuthenticated, require_authenticated

from . import services, uploads
from .serializers import PlaceSerializer


class PlaceCollectionView(APIView):
    """``GET`` searches all places, ``POST`` creates, ``PUT`` replaces an owned place."""

    def get_permissions(self):  # type: ignore
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [IsSessionAuthenticated()]

    def get(self, request):  # type: ignore
        places = services.search_places(request.query_params.get("search"))
        return Response(PlaceSerializer(places, many=True).data)

    def post(self, request):  # type: ignore
        claims = require_authenticated(request)
        place = services.create_place(claims, request.data)
        return Response(PlaceSerializer(place).data)

    def put(self, request):  # type: ignore
        claims = require_authenticated(request)
        services.update_place(claims, request.data)
        return Response("ok")


class PlaceDetailView(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request, pk):  # type: ignore
        return Response(PlaceSerializer(services.get_place(pk)).data)


class UserPlacesView(APIView):
    permission_classes = [IsSessionAuthenticated]

    def get(self, request):  # type: ignore
        places = services.list_user_places(request.auth)
        return Response(PlaceSerializer(places, many=True).data)


class UploadView(APIView):
    permission_classes = [IsSessionAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):  # type: ignore
        return Response(uploads.save_uploaded_photos(request.FILES.getlist("photos")))


class UploadByLinkView(APIView):
    permission_classes = [IsSessionAuthenticated]

    def post(self, request):  # type: ignore
        return Response(uploads.download_photo(request.data.get("link")))
