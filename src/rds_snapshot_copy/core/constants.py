#!/usr/bin/env python3
"""Core constants for RDS snapshot copy preparation."""

# KMS Constants
AWS_MANAGED_ALIAS_PREFIX = "alias/aws"
RESTORE_ATTRIBUTE = "restore"

# Snapshot Descriptor Constants
DESCRIPTOR_SEPARATOR = "|"
SNAPSHOT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Prompt Texts
RESOURCE_PROMPT = "Please choose a resource"
KEY_PROMPT = "Choose a key to use for snapshot encryption"
SNAPSHOT_PROMPT = "Select a snapshot to copy"
REUSE_PROMPT = "Use an existing snapshot"

# AWS Service Constants
DEFAULT_AWS_REGION = "ap-southeast-2"
