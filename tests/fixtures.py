CLUSTER = "my-cluster"
SERVICE = "api"
TASK_DEF_ARN = "arn:aws:ecs:eu-west-1:123456789012:task-definition/api:7"
NEW_TASK_DEF_ARN = "arn:aws:ecs:eu-west-1:123456789012:task-definition/api:8"
DB_SECRET_ARN = "arn:aws:secretsmanager:eu-west-1:123456789012:secret:api/db-AbCdEf"
MAIL_SECRET_ARN = "arn:aws:secretsmanager:eu-west-1:123456789012:secret:api/mail-GhIjKl"

TASK_DEF = {
    "taskDefinitionArn": TASK_DEF_ARN,
    "family": "api",
    "revision": 7,
    "status": "ACTIVE",
    "taskRoleArn": "arn:aws:iam::123456789012:role/api-task",
    "executionRoleArn": "arn:aws:iam::123456789012:role/api-execution",
    "networkMode": "awsvpc",
    "cpu": "512",
    "memory": "1024",
    "requiresCompatibilities": ["FARGATE"],
    "compatibilities": ["EC2", "FARGATE"],
    "requiresAttributes": [{"name": "com.amazonaws.ecs.capability.docker-remote-api.1.18"}],
    "volumes": [{"name": "cache"}],
    "placementConstraints": [],
    "runtimePlatform": {"cpuArchitecture": "ARM64", "operatingSystemFamily": "LINUX"},
    "registeredBy": "arn:aws:iam::123456789012:user/deployer",
    "containerDefinitions": [
        {
            "name": "app",
            "image": "myrepo/app:v1",
            "essential": True,
            "portMappings": [{"containerPort": 8080, "hostPort": 8080, "protocol": "tcp"}],
            "environment": [
                {"name": "LOG_LEVEL", "value": "info"},
                {"name": "DB_PASSWORD", "value": "plaintext"},
                {"name": "PORT", "value": "8080"},
            ],
            "secrets": [{"name": "OLD_TOKEN", "valueFrom": "arn:aws:ssm:eu-west-1:123456789012:parameter/old"}],
        },
        {
            "name": "proxy",
            "image": "myrepo/proxy:v1",
            "essential": False,
            "environment": [{"name": "UPSTREAM", "value": "localhost:8080"}],
        },
    ],
}

TAGS = [{"key": "team", "value": "payments"}, {"key": "env", "value": "prod"}]


