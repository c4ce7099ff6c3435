from tickets.services.sale_service import SaleService

__all__ = ["SaleService"]
