from fastapi import FastAPI


def create_test_app(routers, middlewares=None, dependency_overrides=None) -> FastAPI:
    """
    Create a FastAPI test application with the given routers and middlewares.

    Args:
        routers: The router, or list of routers, to include in the app.
        middlewares: Optional list of (middleware_class, config_dict) tuples.
        dependency_overrides: Optional mapping of provider -> replacement callable.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app(
            [router1, router2],
            dependency_overrides={get_i18n_service: lambda: service},
        )
    """
    # Create a fresh app
    app = FastAPI()

    # Setup rate limiting
    from api.dependencies.rate_limits import setup_rate_limiter

    setup_rate_limiter(app)

    # Add any additional middlewares
    if middlewares:
        for middleware_class, middleware_config in middlewares:
            app.add_middleware(middleware_class, **middleware_config)

    # Include the router
    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    if dependency_overrides:
        app.dependency_overrides.update(dependency_overrides)

    return app
