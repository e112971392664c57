"""Generation pipeline: stages, orchestrator, data types and errors"""
