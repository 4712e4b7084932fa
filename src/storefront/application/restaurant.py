"""Application service: the public restaurant pages (queries)."""

from __future__ import annotations

from storefront.application.dto import OperationResult, failure_from
from storefront.domain.exceptions import GatewayError
from storefront.domain.gateway.restaurant_gateway import RestaurantGateway


class RestaurantHandler:

    def __init__(self, gateway: RestaurantGateway) -> None:
        self._gateway = gateway

    def info(self) -> OperationResult:
        try:
            info = self._gateway.get_info()
        except GatewayError as exc:
            return failure_from(exc, "Failed to load restaurant details.")
        if info is None:
            return OperationResult.ok("No restaurant details published yet.")
        return OperationResult.ok(info.name, data=info)

    def chefs(self) -> OperationResult:
        try:
            chefs = self._gateway.list_chefs()
        except GatewayError as exc:
            return failure_from(exc, "Failed to load chefs.")
        return OperationResult.ok(f"{len(chefs)} chefs", data=chefs)

    def gallery(self) -> OperationResult:
        try:
            images = self._gateway.list_gallery()
        except GatewayError as exc:
            return failure_from(exc, "Failed to load the gallery.")
        return OperationResult.ok(f"{len(images)} photos", data=images)
