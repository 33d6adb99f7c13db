"""Company (tenant) scoping for API views."""

from __future__ import annotations

from rest_framework.request import Request  # type: ignore

from shared.domain.exceptions import NotFoundError, ValidationError

from .models import Company

COMPANY_PARAM = "companyId"


def get_company_id(request: Request) -> str | None:
    """Read the tenant from the query string, falling back to the body."""

    company_id = request.query_params.get(COMPANY_PARAM)
    if not company_id and hasattr(request.data, "get"):
        company_id = request.data.get(COMPANY_PARAM)
    return str(company_id) if company_id else None


def resolve_company(company_id: str | None) -> Company | None:
    if not company_id:
        return None
    company = Company.objects.filter(pk=company_id).first()
    if company is None:
        raise NotFoundError(f"Company {company_id} not found")
    return company


class CompanyScopedViewSetMixin:
    """Restrict a viewset to the company named by ``companyId``.

    Requests without a company see every row, like the unscoped
    admin tooling of the front desk.
    """

    company_lookup = "company_id"

    def get_company(self) -> Company | None:
        return resolve_company(get_company_id(self.request))  # type: ignore[attr-defined]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()  # type: ignore[misc]
        company_id = get_company_id(self.request)  # type: ignore[attr-defined]
        if company_id:
            qs = qs.filter(**{self.company_lookup: company_id})
        return qs

    def perform_create(self, serializer):  # type: ignore
        company = self.get_company()
        if company is not None:
            serializer.save(company=company)
        elif "company" in serializer.validated_data:
            serializer.save()
        else:
            raise ValidationError("companyId is required")
