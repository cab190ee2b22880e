import django_filters
from django.db.models import Q

from authentication.models import User


class DoctorFilter(django_filters.FilterSet):
    specialty = django_filters.CharFilter(method="filter_specialty")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = User
        fields = ["specialty", "search"]

    def filter_specialty(self, queryset, name, value):
        value = value.strip()
        if not value or value.lower() == "all":
            return queryset
        return queryset.filter(profile__specialization__icontains=value)

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(profile__first_name__icontains=value)
            | Q(profile__last_name__icontains=value)
            | Q(profile__specialization__icontains=value)
            | Q(email__icontains=value)
        )
