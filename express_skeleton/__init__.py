"""express-skeleton -- scaffolds a ready-to-run Express server project.

Quick usage::

    import asyncio

    from express_skeleton.scaffolder import ApplicationGenerator, GenerationContext

    context = GenerationContext.from_destination("./my-app", force=False)
    status = asyncio.run(ApplicationGenerator(context).run())

Or from a shell::

    express-skeleton ./my-app
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
