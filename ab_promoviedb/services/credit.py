from typing import Any

from ab_promoviedb.services.base import BaseService


class CreditService(BaseService):
    collection = "np/3/credit"

    def get_details(self, credit_id: str) -> dict[str, Any]:
        """按 credit_id 获取演职记录详情"""
        return self._get(self.resource_path(credit_id))
