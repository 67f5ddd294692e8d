import django_filters

from modules.products.models import Product, ProductStatus


class ProductFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    code = django_filters.CharFilter(field_name="code", lookup_expr="iexact")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    status = django_filters.ChoiceFilter(choices=ProductStatus.choices)
    active = django_filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = Product
        fields = ["name", "code", "min_price", "max_price", "status", "active"]
