# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import boto3
import botocore.exceptions
from botocore.config import Config
from ..errors import GatewayError, ServiceNotFoundError
import logging

logger = logging.getLogger(__name__)

AWS_ERRORS = (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError)

def ecs_client(region_name=""):
    try:
        if len(region_name) > 0:
            return boto3.client("ecs", config=Config(region_name = region_name))
        return boto3.client("ecs")
    except botocore.exceptions.BotoCoreError as error:
        raise GatewayError("failed to create ECS client, %s"%(error)) from error

def ecs_get_service_details(client, cluster_name, service_name):
    try:
        response = client.describe_services(
            cluster=cluster_name,
            services=[service_name]
        )
    except AWS_ERRORS as error:
        raise GatewayError("failed to describe service %s, %s"%(service_name, error)) from error
    services = response.get("services", [])
    if len(services) <= 0:
        for failure in response.get("failures", []):
            logger.debug("describe_services failure %s: %s"%(failure.get("arn"), failure.get("reason")))
        raise ServiceNotFoundError(cluster_name, service_name)
    return services[0]

def ecs_get_task_definition(client, task_definition):
    try:
        response = client.describe_task_definition(taskDefinition=task_definition)
    except AWS_ERRORS as error:
        raise GatewayError("failed to describe task definition %s, %s"%(task_definition, error)) from error
    return response.get("taskDefinition", {})

# task definition currently used by the service
def ecs_get_task(client, cluster_name, service_name):
    svc_def = ecs_get_service_details(client, cluster_name, service_name)
    task_def_arn = svc_def.get("taskDefinition")
    logger.info("Service %s in cluster %s runs %s"%(service_name, cluster_name, task_def_arn))
    return ecs_get_task_definition(client, task_def_arn)

# tags are a separate resource relationship and are not part of
# a registered task definition, they have to be listed on their own
def ecs_get_task_tags(client, task_definition_arn):
    try:
        response = client.list_tags_for_resource(resourceArn=task_definition_arn)
    except AWS_ERRORS as error:
        raise GatewayError("failed to list tags for %s, %s"%(task_definition_arn, error)) from error
    return response.get("tags", [])

def ecs_register_revision(client, request):
    try:
        response = client.register_task_definition(**request)
    except AWS_ERRORS as error:
        raise GatewayError("failed to register task definition %s, %s"%(request.get("family"), error)) from error
    return response["taskDefinition"]["taskDefinitionArn"]

# points the service at task_def_arn, ECS starts a rolling deployment
def ecs_deploy_task_arn(client, cluster_name, service_name, task_def_arn):
    try:
        client.update_service(
            cluster=cluster_name,
            service=service_name,
            taskDefinition=task_def_arn
        )
    except AWS_ERRORS as error:
        raise GatewayError("failed to update service %s, %s"%(service_name, error)) from error
    logger.info("Service %s in cluster %s now uses %s"%(service_name, cluster_name, task_def_arn))
