#!/usr/bin/env python3
"""Store the email provider API key in Secrets Manager.

Creates the secret on first run and updates its value afterwards. Prints the
ARN to set as EMAIL_API_KEY_SECRET_ARN on the Lambda function.

Usage:
    EMAIL_API_KEY=re_... python scripts/store_email_api_key.py [secret-name]
"""

import os
import sys
from pathlib import Path

from botocore.exceptions import ClientError
from dotenv import load_dotenv

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.clients import get_secrets_client
from core.config import get_config

DEFAULT_SECRET_NAME = "fuelbhai/email-api-key"


def store_secret(client, name: str, value: str) -> str:
    """Create or update the secret; returns its ARN."""
    try:
        response = client.create_secret(Name=name, SecretString=value)
        print(f"✓ Created secret {name}")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceExistsException":
            response = client.put_secret_value(SecretId=name, SecretString=value)
            print(f"✓ Updated secret {name}")
        else:
            raise
    return response["ARN"]


def main():
    load_dotenv()
    api_key = os.environ.get("EMAIL_API_KEY", "")
    if not api_key:
        print("EMAIL_API_KEY is not set")
        sys.exit(1)

    name = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SECRET_NAME
    config = get_config()

    arn = store_secret(get_secrets_client(config.aws_region), name, api_key)

    print()
    print(f"EMAIL_API_KEY_SECRET_ARN={arn}")


if __name__ == "__main__":
    main()
