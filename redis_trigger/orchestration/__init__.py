"""
Orchestration Layer - Workflow Coordination

This layer coordinates the pipeline workflow.
- Pure workflow coordination
- Composes extract and load operations around the trigger wait
"""
