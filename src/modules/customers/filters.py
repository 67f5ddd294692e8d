import django_filters

from modules.customers.models import Customer
from modules.customers.validators import normalize_cpf


class CustomerFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    email = django_filters.CharFilter(field_name="email", lookup_expr="iexact")
    cpf = django_filters.CharFilter(method="filter_cpf")
    active = django_filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = Customer
        fields = ["name", "email", "cpf", "active"]

    def filter_cpf(self, queryset, name, value):
        return queryset.filter(cpf=normalize_cpf(value))
