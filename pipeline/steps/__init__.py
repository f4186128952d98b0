"""Pipeline steps package.

This package contains all the individual steps in the email generation pipeline:
- request_validator: Checks subject/purpose and fills defaults
- prompt_compiler: Builds the instruction text and generation parameters
- generation_client: Calls the generation service under a timeout
- fallback_synthesizer: Template emails used when generation is unavailable
- result_assembler: Combines text, source tag and metadata
"""
