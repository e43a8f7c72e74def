from users_api.main import main

raise SystemExit(main())
