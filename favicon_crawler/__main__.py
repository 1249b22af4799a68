from favicon_crawler.cli import main

raise SystemExit(main())
