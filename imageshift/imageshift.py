# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import click

from .overrides import parse_overrides, split_entries
from .errors import ImageShiftError
from .secretsmng.secrets_reader import secrets_client, resolve_secrets
from .ecs.ecs_parser import build_revision
from .ecs.ecs_reader_writer import (
    ecs_client,
    ecs_get_task,
    ecs_get_task_tags,
    ecs_register_revision,
    ecs_deploy_task_arn
)

import logging
import logging.config
LOGGING_CONFIG = { 
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': { 
        'standard': { 
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': { 
        'default': { 
            'level': 'INFO',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',  # Default is stderr
        },
    },
    'loggers': { 
        '': {  # root logger
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': False
        }
    } 
}
logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger()

# logs the failure and stops the command with a message naming the phase,
# click exits with status 1
def phase_failed(phase, error):
    message = "failed to %s: %s"%(phase, error)
    logger.error(message)
    raise click.ClickException(message) from error

def log_revision_events(events):
    for event in events:
        if event.get("missing"):
            logger.warning("Container %s not found in task definition, skipping"%(event["container"]))
            continue
        logger.info("Updating container %s image from %s to %s"%(event["container"], event["old"], event["new"]))

# parse -> resolve secrets -> fetch -> build -> register -> (deploy)
def shift(region, cluster_name, service, containers, secrets, deploy):
    overrides = parse_overrides(split_entries(containers))
    secret_ids = split_entries(secrets)
    if len(overrides) <= 0 and len(secret_ids) <= 0:
        logger.warning("No containers to update")
        return None

    secret_refs = {}
    if len(secret_ids) > 0:
        try:
            secret_refs = resolve_secrets(secrets_client(region), secret_ids)
        except ImageShiftError as error:
            phase_failed("resolve secrets", error)

    try:
        client = ecs_client(region)
        task_def = ecs_get_task(client, cluster_name, service)
        current_tags = ecs_get_task_tags(client, task_def.get("taskDefinitionArn"))
    except ImageShiftError as error:
        phase_failed("fetch task definition", error)

    request, events = build_revision(task_def, current_tags, overrides, secret_refs)
    log_revision_events(events)

    try:
        revision = ecs_register_revision(client, request)
    except ImageShiftError as error:
        phase_failed("register task revision", error)
    logger.info("New task revision created %s"%(revision))

    if not deploy:
        logger.info("Task update / deployment skipped")
        return revision

    try:
        ecs_deploy_task_arn(client, cluster_name, service, revision)
    except ImageShiftError as error:
        phase_failed("activate task revision %s"%(revision), error)
    return revision


# Click cli entry point function
@click.command(context_settings={"help_option_names": ["-h", "--help"]},
               epilog="Example: image-shift -r eu-west-1 -n my-cluster -s api -c app=new-image-test:latest -c proxy=:bump-only-version")
@click.option("-r", "--region", required=True, envvar="AWS_REGION", type=str, help="Region of your ECS cluster")
@click.option("-n", "--cluster-name", required=True, type=str, help="Name of your ECS cluster")
@click.option("-s", "--service", required=True, type=str, help="Select service in ECS cluster")
@click.option("-c", "--container", "containers", multiple=True, help="Name and version of the container, container-name=image-name:tag or container-name=:tag")
@click.option("-k", "--secret", "secrets", multiple=True, help="Secrets Manager secret id or ARN whose json keys are attached to every container")
@click.option("-d", "--deploy", is_flag=True, default=False, help="Update & deploy service to new task definition")
@click.option("-l", "--log_level", default="INFO", type=click.Choice(["DEBUG","INFO","WARNING","ERROR","CRITICAL"], case_sensitive=False), help="Select log level")
def image_shift(region, cluster_name, service, containers, secrets, deploy, log_level):
    """Update container images in given service."""
    logger.setLevel(getattr(logging,log_level.upper()))
    for handler in logger.handlers:
        handler.setLevel(getattr(logging,log_level.upper()))
    shift(region, cluster_name, service, containers, secrets, deploy)
