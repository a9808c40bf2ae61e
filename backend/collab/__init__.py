"""
collab package

Read-only question API. Run with:

    uvicorn collab.main:app

or the `collab-questions` console script. Do NOT put runtime logic here.
"""
