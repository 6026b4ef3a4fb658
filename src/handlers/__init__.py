"""
Lambda Handlers for the SPFx Footer Gateway

サーバレス構成のエントリポイント:
- Gateway (CORS プリフライト / ヘルスチェック / Graph・SharePoint プロキシ)
"""
