# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0

# every fatal error raised while shifting images derives from ImageShiftError,
# the cli turns them into a message naming the failed phase
class ImageShiftError(Exception):
    pass


# ECS api failure, the botocore error is chained as __cause__
class GatewayError(ImageShiftError):
    pass


class ServiceNotFoundError(GatewayError):
    def __init__(self, cluster, service):
        self.cluster = cluster
        self.service = service
        super().__init__("service %s not found in cluster %s" % (service, cluster))


class SecretFetchError(ImageShiftError):
    pass


class SecretDecodeError(ImageShiftError):
    def __init__(self, secret, reason):
        self.secret = secret
        self.reason = reason
        super().__init__("failed to decode secret %s: %s" % (secret, reason))
