"""
Services - pipeline components, LLM access and infrastructure
"""
