"""FilterSet definitions for place search and listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Place


class PlaceFilterSet(django_filters.FilterSet):
    """Free-text ``search`` over title, address and description."""

    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Place
        fields = ["search"]

    def filter_search(self, queryset, name, value):  # type: ignore
        return queryset.search(value)
