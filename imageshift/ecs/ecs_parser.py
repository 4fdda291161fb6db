# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import copy
from . import ecs_objects

# ":v2" keeps the repository of the current image and swaps the tag,
# anything else replaces the whole image
def image_for(current_image, image_spec):
    if image_spec.startswith(":"):
        return current_image.split(":")[0] + image_spec
    return image_spec

# plain environment values must not shadow a secret of the same name
def prune_environment(environment, secret_refs):
    return [env for env in environment if env.get("name") not in secret_refs]

def secret_list(secret_refs):
    return [copy.deepcopy(secret_refs[name]) for name in sorted(secret_refs)]

def container_revision(container_def, overrides, secret_refs, events):
    container = copy.deepcopy(container_def)
    name = container.get("name")
    if name in overrides:
        old_image = container.get("image", "")
        new_image = image_for(old_image, overrides[name])
        events.append({"container": name, "old": old_image, "new": new_image})
        container["image"] = new_image

    environment = container.get("environment", [])
    if len(environment) > 0:
        container["environment"] = prune_environment(environment, secret_refs)

    if len(secret_refs) > 0:
        container["secrets"] = secret_list(secret_refs)
    return container

# builds the register_task_definition request for the next revision of
# task_def. task_def is left untouched, tags come from current_tags since
# the describe snapshot does not carry them reliably.
# Returns the request and a list of events describing what changed, the
# caller decides how to report them.
def build_revision(task_def, current_tags, overrides, secret_refs):
    events = []
    request = {}
    for attribute in ecs_objects.TASK_DEF_REGISTER_ATTRIBUTES:
        if attribute in task_def:
            request[attribute] = copy.deepcopy(task_def[attribute])

    container_names = set()
    containers = []
    for container_def in task_def.get("containerDefinitions", []):
        container_names.add(container_def.get("name"))
        containers.append(container_revision(container_def, overrides, secret_refs, events))
    request["containerDefinitions"] = containers

    for name in sorted(overrides):
        if name not in container_names:
            events.append({"container": name, "missing": True})

    if current_tags is not None and len(current_tags) > 0:
        request["tags"] = copy.deepcopy(list(current_tags))
    return request, events
