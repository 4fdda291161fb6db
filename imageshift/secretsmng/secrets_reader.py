# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import boto3
import botocore.exceptions
from botocore.config import Config
import json
from ..errors import SecretFetchError, SecretDecodeError
import logging

logger = logging.getLogger(__name__)

def secrets_client(region_name=""):
    try:
        if len(region_name) > 0:
            return boto3.client("secretsmanager", config=Config(region_name = region_name))
        return boto3.client("secretsmanager")
    except botocore.exceptions.BotoCoreError as error:
        raise SecretFetchError("failed to create Secrets Manager client, %s"%(error)) from error

# ECS reads a single json key of a secret with <secret arn>:<json key>::
# (empty version stage and version id means AWSCURRENT)
def secret_value_from(secret_arn, key):
    return "%s:%s::"%(secret_arn, key)

# secret payload has to be a flat json object of strings
def decode_secret(entry):
    secret = entry.get("ARN", entry.get("Name", ""))
    payload = entry.get("SecretString")
    if payload is None:
        raise SecretDecodeError(secret, "secret has no SecretString")
    try:
        values = json.loads(payload)
    except ValueError as error:
        raise SecretDecodeError(secret, "invalid json, %s"%(error)) from error
    if not isinstance(values, dict):
        raise SecretDecodeError(secret, "expected a json object")
    for k, v in values.items():
        if not isinstance(v, str):
            raise SecretDecodeError(secret, "value of %s is not a string"%(k))
    return values

def batch_get_secret_values(client, secret_ids):
    secret_values = []
    request = {"SecretIdList": list(secret_ids)}
    while True:
        try:
            response = client.batch_get_secret_value(**request)
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            raise SecretFetchError("failed to get secrets %s, %s"%(", ".join(secret_ids), error)) from error
        errors = response.get("Errors", [])
        if len(errors) > 0:
            failed = ["%s (%s)"%(e.get("SecretId", ""), e.get("ErrorCode", "")) for e in errors]
            raise SecretFetchError("failed to get secrets %s"%(", ".join(failed)))
        secret_values += response.get("SecretValues", [])
        next_token = response.get("NextToken")
        if next_token is None or len(next_token) <= 0:
            break
        request["NextToken"] = next_token
    return secret_values

# returns {json key: {"name": json key, "valueFrom": "<arn>:<json key>::"}}
# for every key of every requested secret. When two secrets expose the
# same key the one returned last wins, the api does not guarantee an order.
def resolve_secrets(client, secret_ids):
    output = {}
    if len(secret_ids) <= 0:
        return output

    for entry in batch_get_secret_values(client, secret_ids):
        secret_arn = entry.get("ARN")
        for key in decode_secret(entry):
            if key in output:
                logger.debug("Secret key %s from %s overrides %s"%(key, secret_arn, output[key]["valueFrom"]))
            output[key] = {
                "name": key,
                "valueFrom": secret_value_from(secret_arn, key)
            }
    return output
