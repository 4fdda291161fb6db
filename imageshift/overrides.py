# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import logging

logger = logging.getLogger(__name__)

OVERRIDE_FORMAT = "container-name=image-name:tag or container-name=:tag"

# click hands over every --container/--secret occurrence,
# each of them may still be a comma separated list
def split_entries(values):
    entries = []
    for value in values:
        for item in value.split(","):
            item = item.strip()
            if len(item) > 0:
                entries.append(item)
    return entries

# turns ["app=repo/app:v2", "proxy=:v9"] into {"app": "repo/app:v2", "proxy": ":v9"}
# malformed entries are skipped with a warning, a repeated container name wins
def parse_overrides(raw_entries):
    output = {}
    for mapping in raw_entries:
        split = mapping.split("=")
        if len(split) != 2:
            logger.warning("Invalid container mapping %s, should be in format: %s"%(mapping, OVERRIDE_FORMAT))
            continue
        name, image = split
        if len(name) <= 0 or len(image) <= 0:
            logger.warning("Invalid container mapping %s, missing container name or image name, should be in format: %s"%(mapping, OVERRIDE_FORMAT))
            continue
        output[name] = image
    return output
