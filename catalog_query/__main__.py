from catalog_query.main import main

raise SystemExit(main())
