"""Describe handlers for EC2 instances and their status checks.

An empty identifier list describes every instance visible in the region.
Zero matching instances is an empty result, never an error; naming an id
EC2 does not know is reported by EC2 as ``InvalidInstanceID.NotFound``.
"""
from typing import Any, Dict, List

import structlog

from infra_actions.api.formatters import (
    format_instance_status_table,
    format_instances_table,
    format_summary,
)
from infra_actions.api.handlers.base_handler import BaseLambdaHandler, to_json_safe
from infra_actions.domain.requests import DescribeInstanceRequest, DescribeInstancesRequest

logger = structlog.get_logger(__name__)


class _PaginatedDescribeMixin:
    """Shared EC2 describe calls, reading every page of the result."""

    def _paginate(self, operation_name: str, result_key: str, **kwargs) -> List[Dict[str, Any]]:
        """
        Collect ``result_key`` from every page of a paginated EC2 operation.

        Pages are read inside the client factory's call translation, so a
        failure on any page surfaces as a ProviderError.
        """
        paginator = self.client_factory.ec2().get_paginator(operation_name)

        def collect(**params) -> List[Dict[str, Any]]:
            items: List[Dict[str, Any]] = []
            for page in paginator.paginate(**params):
                items.extend(page.get(result_key, []))
            return items

        items = self.client_factory.invoke(collect, operation_name, **kwargs)
        logger.debug(f"{operation_name} response", item_count=len(items))
        return items

    def _describe_reservations(self, instance_ids: List[str]) -> List[Dict[str, Any]]:
        kwargs: Dict[str, Any] = {"DryRun": False}
        if instance_ids:
            kwargs["InstanceIds"] = instance_ids
        return self._paginate("describe_instances", "Reservations", **kwargs)


class DescribeInstanceHandler(_PaginatedDescribeMixin, BaseLambdaHandler[DescribeInstanceRequest]):
    """Describe one named instance, or every instance when none is named."""

    event_model = DescribeInstanceRequest

    def handle(self, request: DescribeInstanceRequest) -> str:
        reservations = self._describe_reservations(request.instance_ids)
        return format_summary({"Reservations": to_json_safe(reservations)})


class DescribeInstancesHandler(_PaginatedDescribeMixin, BaseLambdaHandler[DescribeInstancesRequest]):
    """Describe a set of instances and log a per-instance table."""

    event_model = DescribeInstancesRequest

    def handle(self, request: DescribeInstancesRequest) -> str:
        reservations = self._describe_reservations(request.instance_ids)

        instance_count = sum(len(r.get("Instances", [])) for r in reservations)
        logger.info(
            f"Got {len(reservations)} reservations with {instance_count} instances",
            instance_ids=request.instance_ids,
        )
        logger.info("Instances:\n" + format_instances_table(reservations))

        return format_summary({"Reservations": to_json_safe(reservations)})


class DescribeInstanceStatusHandler(_PaginatedDescribeMixin, BaseLambdaHandler[DescribeInstancesRequest]):
    """Describe state and status checks, including stopped and terminated instances."""

    event_model = DescribeInstancesRequest

    def handle(self, request: DescribeInstancesRequest) -> str:
        kwargs: Dict[str, Any] = {"IncludeAllInstances": True, "DryRun": False}
        if request.instance_ids:
            kwargs["InstanceIds"] = request.instance_ids
        statuses = self._paginate("describe_instance_status", "InstanceStatuses", **kwargs)

        logger.info("Instance status:\n" + format_instance_status_table(statuses))
        return format_summary({"InstanceStatuses": to_json_safe(statuses)})
