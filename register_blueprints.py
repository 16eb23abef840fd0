def register_blueprints(app):
    from modules.reference.currencies.routes import bp as currencies_bp
    from modules.reference.countries.routes import bp as countries_bp
    from modules.reference.exchanges.routes import bp as exchanges_bp
    from modules.reference.investment_segments.routes import bp as investment_segments_bp
    from modules.reference.investment_types.routes import bp as investment_types_bp

    app.register_blueprint(currencies_bp)
    app.register_blueprint(countries_bp)
    app.register_blueprint(exchanges_bp)

    # Блок "Інвестиції"
    app.register_blueprint(investment_segments_bp)
    app.register_blueprint(investment_types_bp)
