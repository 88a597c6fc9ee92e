"""
Shared view mixins.
"""

import logging

from django.db.models import ProtectedError
from rest_framework import status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class ProtectedDestroyMixin:
    """Refuse deletion of records that other records still reference."""

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        try:
            self.perform_destroy(instance)
        except ProtectedError as exc:
            referenced_by = sorted({str(obj._meta.verbose_name_plural) for obj in exc.protected_objects})
            logger.warning(f"Refused to delete {instance}: referenced by {referenced_by}")
            return Response(
                {'error': f'{instance} cannot be deleted while referenced by: {", ".join(referenced_by)}'},
                status=status.HTTP_400_BAD_REQUEST
            )
        logger.info(f"{instance._meta.verbose_name} {instance} deleted by {request.user.username}")
        return Response(status=status.HTTP_204_NO_CONTENT)
